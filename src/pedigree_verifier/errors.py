"""Exception hierarchy for Pedigree Verifier.

Data-quality problems inside a document are never errors; only collaborator
failures (fetch, parse infrastructure, persistence) and invalid requests raise.
"""
from __future__ import annotations


class PedigreeVerifierError(Exception):
    """Base exception for all Pedigree Verifier errors."""


class FetchError(PedigreeVerifierError):
    """Raised when a registry page cannot be fetched."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DocumentParseError(PedigreeVerifierError):
    """Raised when input is not markup at all."""


class SinkError(PedigreeVerifierError):
    """Raised when the persistence store rejects a write."""

    def __init__(self, message: str, status_code: int | None = None, response: object = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class InvalidRequestError(PedigreeVerifierError):
    """Raised when a request is missing its required inputs."""

    def __init__(self, message: str, example: str | None = None):
        super().__init__(message)
        self.example = example
