"""Dependency providers for submissions package."""

from typing import Annotated

from fastapi import Depends

from infrastructure.services import ServiceClientDep
from packages.submissions.repository import SubmissionRepository


def get_submission_repository(client: ServiceClientDep) -> SubmissionRepository:
    return SubmissionRepository(client)


SubmissionRepositoryDep = Annotated[
    SubmissionRepository, Depends(get_submission_repository)
]
