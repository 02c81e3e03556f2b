"""Supabase Integration."""

from discovery.infrastructure.integrations.supabase.supabase_catalog import (
    SupabaseBusinessCatalog,
)

__all__ = ["SupabaseBusinessCatalog"]
