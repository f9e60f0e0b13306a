"""Persistence of verification results."""
from __future__ import annotations

from pedigree_verifier.sinks.records import build_health_records, build_pedigree_record
from pedigree_verifier.sinks.supabase import HEALTH_RECORDS_TABLE, PEDIGREES_TABLE, SupabaseSink

__all__ = [
    "build_health_records",
    "build_pedigree_record",
    "SupabaseSink",
    "HEALTH_RECORDS_TABLE",
    "PEDIGREES_TABLE",
]
