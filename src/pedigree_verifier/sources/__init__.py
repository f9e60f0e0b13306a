"""Pedigree registry source connectors."""
from __future__ import annotations

from pedigree_verifier.sources.base import BaseSource, RegistrySource
from pedigree_verifier.sources.canecorso import CaneCorsoPedigreeSource

__all__ = [
    "BaseSource",
    "RegistrySource",
    "CaneCorsoPedigreeSource",
]
