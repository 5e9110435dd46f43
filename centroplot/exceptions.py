"""
Exceptions raised by centroplot

MalformedRowError aborts loading of a table. EmptyRecordSetError and
DegenerateScaleError are raised when no positive scale factor can be derived
for a species; the layout engine reports them and skips that species.
CanvasSizeError aborts a layout whose canvas has no room at all.
"""

from __future__ import annotations
from typing import Optional


class CentroplotError(Exception):
    """Base class for centroplot errors"""


class MalformedRowError(CentroplotError, ValueError):
    """A table row has a missing, empty or invalid required column"""

    def __init__(
        self,
        message: str,
        row_number: Optional[int] = None,
        column: Optional[str] = None,
        value: Optional[object] = None
    ) -> None:
        self.row_number = row_number
        self.column = column
        self.value = value
        if row_number is not None:
            message = f"Row {row_number}: {message}"
        super().__init__(message)


class EmptyRecordSetError(CentroplotError, ValueError):
    """Scale requested for a species with no chromosome records"""


class DegenerateScaleError(CentroplotError, ArithmeticError):
    """Longest arm is zero or no drawing width is left, so no positive scale factor exists"""


class CanvasSizeError(CentroplotError, ValueError):
    """Canvas width is not positive or margin is negative"""
