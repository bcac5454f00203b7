"""Error types with formatted help text."""

from __future__ import annotations

from collections.abc import Iterable


class RetrolexError(Exception):
    """Base class for recoverable errors raised by retrolex."""


class _UnknownName(RetrolexError):
    kind = "name"

    def __init__(self, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = tuple(sorted(supported))
        self.message = f"unknown {self.kind} '{name}'"
        super().__init__(self.format())

    def format(self) -> str:
        choices = ", ".join(self.supported)
        return f"error: {self.message}\n  = help: expected one of: {choices}"


class UnknownDialect(_UnknownName):
    """Raised when a mode identifier names no supported dialect."""

    kind = "dialect"


class UnknownPlatform(_UnknownName):
    """Raised when a project platform identifier is not supported."""

    kind = "platform"
