"""
Errors raised by table sheets and their column accessors.
"""
from __future__ import annotations


class TableSheetError(Exception):
    """Base class for every error raised by tablesheet."""


class FailedToGetTableValueError(TableSheetError):
    """An accessor could not produce a value for one element.

    The failing cell is left empty and annotated with this error.
    """

    def __init__(self, property: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(f"{message}\nProperty: {property}")
        self.property = property
        self.message = message
        if cause is not None:
            self.__cause__ = cause


class AccessorInvocationError(TableSheetError):
    """Raised from an accessor to leave its cell empty without a comment."""


class InvalidStartRowError(TableSheetError, IndexError):
    """Table rows are 1-based; anything below 1 is rejected."""


class EmptyTableError(TableSheetError, ValueError):
    """A table needs at least one registered column."""
