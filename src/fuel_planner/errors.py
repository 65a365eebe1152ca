"""Engine error type.

Every engine operation validates its own numeric preconditions and raises
``InvalidInput`` instead of letting NaN or infinity leak into a report.
"""

from __future__ import annotations

from pydantic import ValidationError


class InvalidInput(ValueError):
    """A caller-supplied value broke a business rule."""

    def __init__(self, reason: str, field: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field

    def __str__(self):
        if self.field:
            return f"{self.field}: {self.reason}"
        return self.reason

    def to_dict(self) -> dict[str, str | None]:
        return {"error": "invalid_input", "field": self.field, "reason": self.reason}


def invalid_input_from(exc: ValidationError) -> InvalidInput:
    """Convert the first pydantic error into an ``InvalidInput``."""
    errors = exc.errors()
    if not errors:
        return InvalidInput(str(exc))
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    return InvalidInput(first.get("msg", str(exc)), field=field)
