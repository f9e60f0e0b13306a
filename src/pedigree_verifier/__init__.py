"""Pedigree Verifier - registry scraping and verification scoring for Cane Corso pedigrees.

Extracts pedigree and health-certification data from canecorsopedigree.com
profile pages, normalizes it into a canonical record and derives a
deterministic verification score.
"""

__version__ = "0.1.0"

# Lazy imports to keep the extraction core free of network dependencies
def __getattr__(name: str):
    if name == "models":
        from pedigree_verifier import models
        return models
    if name == "extractors":
        from pedigree_verifier import extractors
        return extractors
    if name == "sources":
        from pedigree_verifier import sources
        return sources
    if name == "sinks":
        from pedigree_verifier import sinks
        return sinks
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
