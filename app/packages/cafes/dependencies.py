"""Dependency providers for cafes package."""

from typing import Annotated

from fastapi import Depends

from infrastructure.services import ServiceClientDep, SupabaseClientDep
from packages.cafes.repository import CafeRepository


def get_cafe_repository(client: SupabaseClientDep) -> CafeRepository:
    """Repository for public reads."""
    return CafeRepository(client)


def get_admin_cafe_repository(client: ServiceClientDep) -> CafeRepository:
    """Repository for trusted writes."""
    return CafeRepository(client)


CafeRepositoryDep = Annotated[CafeRepository, Depends(get_cafe_repository)]
AdminCafeRepositoryDep = Annotated[CafeRepository, Depends(get_admin_cafe_repository)]
