from __future__ import annotations

from collections.abc import Sequence


class TemperError(Exception):
    """Base class for pytemper errors."""


class UnknownExtension(TemperError):
    """Raised when no backend is registered for a file extension."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"Unknown file extension {extension!r}, cannot detect template engine"
        )


class BackendNotInstalled(TemperError):
    """Raised when a template backend cannot be imported."""

    def __init__(self, identifier: str, hint: str) -> None:
        self.identifier = identifier
        self.hint = hint
        super().__init__(f"The {identifier} module isn't installed. Run {hint}")


class NoBackendAvailable(TemperError):
    """Raised when none of the candidates for an extension can be imported."""

    def __init__(self, extension: str, candidates: Sequence[str], hints: Sequence[str]) -> None:
        self.extension = extension
        self.candidates = tuple(candidates)
        super().__init__(
            f"No valid template engine installed for {extension}, "
            f"please install {' or '.join(hints)}"
        )


class TemperConfigError(TemperError):
    """Raised when the configuration file cannot be parsed."""
