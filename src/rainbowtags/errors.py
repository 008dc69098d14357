"""Exception classes for rainbowtags.

Scanning never raises for any input text; these exceptions cover misuse of
the configuration surface only.
"""

from __future__ import annotations


class RainbowTagsError(Exception):
    """Base exception for all rainbowtags errors."""

    pass


class ConfigError(RainbowTagsError):
    """Invalid highlight configuration.

    Raised when a HighlightConfig is constructed with values the scanner
    cannot work with (e.g. an empty palette).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config field '{field}': {message}")
