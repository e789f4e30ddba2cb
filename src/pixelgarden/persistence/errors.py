"""Persistence error hierarchy."""

from __future__ import annotations


class PersistenceError(Exception):
    """A persistence tier could not complete an operation."""


class CombinedPersistenceError(PersistenceError):
    """Both tiers of a resilient chain failed.

    The fallback failure is chained as ``__cause__``; the primary failure, if
    any, is kept on ``primary_error``.
    """

    operation = "persist"

    def __init__(self, message: str, primary_error: BaseException | None = None):
        super().__init__(message)
        self.primary_error = primary_error


class SaveFailedError(CombinedPersistenceError):
    operation = "save"


class LoadFailedError(CombinedPersistenceError):
    operation = "load"


class ClearFailedError(CombinedPersistenceError):
    operation = "clear"
