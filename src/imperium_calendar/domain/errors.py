"""Domain exceptions."""

from __future__ import annotations

from imperium_calendar.domain.types import ElementKind

_MAX_SHOWN_CHARS = 20


class InvalidCodeError(ValueError):
    """A code part could not be read as the integer its element needs."""

    def __init__(self, kind: ElementKind, code: str, *, reason: str = "expected digits") -> None:
        self.kind = kind
        self.code = code
        self.reason = reason
        shown = code if len(code) <= _MAX_SHOWN_CHARS else f"{code[:_MAX_SHOWN_CHARS]}..."
        super().__init__(f"Invalid {kind.replace('_', ' ')} code {shown!r}: {reason}")
