"""Supabase integration module."""

from .client import ACTIVE_FILTER, SupabaseClient, eq

__all__ = [
    "ACTIVE_FILTER",
    "SupabaseClient",
    "eq",
]
