from __future__ import annotations

from typing import Any, Optional


class CalendricalError(Exception):
    """Base error."""


class InvalidArgumentError(CalendricalError, ValueError):
    """Raised when a caller-supplied value is outside the legal range of a calendar."""

    def __init__(self, param_name: str, value: Any, message: Optional[str] = None) -> None:
        self.param_name = param_name
        self.value = value
        if message is None:
            message = f"The value of '{param_name}' was out of range; value = {value}."
        super().__init__(message)


class CalendarOverflowError(CalendricalError, OverflowError):
    """Raised when a computation leaves the supported range of a segment."""


class PreconditionError(CalendricalError):
    """Raised on misuse: wrong profile, missing collaborator, incomplete builder."""


class UnknownSchemaError(CalendricalError, KeyError):
    """Raised when a schema name is not registered."""

    def __str__(self) -> str:
        # KeyError would quote the message.
        return str(self.args[0]) if self.args else ""
