"""Failures that abort the import of a single row.

Every error here aborts the whole row: nothing is created and nothing is audited.
Messages always name the offending field(s) and, where one exists, the typed value
that could not be resolved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class RowImportError(RuntimeError):
    """Base class for errors raised while importing a row."""


class ValidationError(RowImportError):
    """The row is unusable before any lookup is attempted."""


class MissingFieldsError(ValidationError):
    """One or more required fields are absent or blank."""

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class FieldResolutionError(RowImportError):
    """A single field could not be mapped to exactly one canonical entity."""

    def __init__(self, field: str, query: str, message: str) -> None:
        self.field = field
        self.query = query
        super().__init__(message)


class NotFoundError(FieldResolutionError):
    def __init__(self, field: str, query: str) -> None:
        super().__init__(field, query, f"No match found for {field} {query!r}")


class AmbiguityError(FieldResolutionError):
    """The closest candidate is further away than the accepted threshold."""

    def __init__(self, field: str, query: str, best_score: int, threshold: int) -> None:
        self.best_score = best_score
        self.threshold = threshold
        super().__init__(
            field,
            query,
            f"No confident match for {field} {query!r} "
            f"(closest distance {best_score}, threshold {threshold})",
        )


class ConsistencyError(FieldResolutionError):
    """A good candidate has no identifier: the reference table is corrupt."""

    def __init__(self, field: str, query: str) -> None:
        super().__init__(
            field,
            query,
            f"Matched reference for {field} {query!r} has no identifier",
        )


class ResolutionError(RowImportError):
    """Aggregate of every field that failed to resolve for one row."""

    def __init__(self, errors: Sequence[FieldResolutionError]) -> None:
        if not errors:
            raise ValueError("ResolutionError requires at least one field error")
        self.errors = tuple(errors)
        super().__init__("; ".join(str(error) for error in self.errors))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(error.field for error in self.errors)


class PersistenceError(RowImportError):
    """The atomic create (or its audit write) was rejected by the store."""
