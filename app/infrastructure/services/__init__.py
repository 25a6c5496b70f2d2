"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslatorDep,
    SupabaseClientDep,
    ServiceClientDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_supabase_client,
    get_service_client,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "SupabaseClientDep",
    "ServiceClientDep",
    "get_settings",
    "get_translator",
    "get_supabase_client",
    "get_service_client",
]
