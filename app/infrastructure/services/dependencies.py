"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import Translator
from integrations.supabase import SupabaseClient
from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_supabase_client,
    get_service_client,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translator with all locales preloaded
TranslatorDep = Annotated[Translator, Depends(get_translator)]

# Database client for public reads
SupabaseClientDep = Annotated[SupabaseClient, Depends(get_supabase_client)]

# Database client for trusted writes
ServiceClientDep = Annotated[SupabaseClient, Depends(get_service_client)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "SupabaseClientDep",
    "ServiceClientDep",
]
