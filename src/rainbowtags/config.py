"""ContextVar-based highlight configuration for rainbowtags.

Provides thread-local configuration using Python's ContextVars (PEP 567).
scan() and HighlightSession read the active config unless one is passed
explicitly.

Thread Safety:
    Each thread (and asyncio task) sees its own ContextVar storage,
    so no locks are needed.

Usage:
    from rainbowtags.config import HighlightConfig, config_context
    from rainbowtags import ContentKind, scan

    with config_context(HighlightConfig(palette=("#f00", "#0f0", "#00f"))):
        spans = scan("<div></div>", ContentKind.MARKUP)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from rainbowtags.errors import ConfigError
from rainbowtags.tokens import Channel

RAINBOW_COLORS: tuple[str, ...] = (
    "#ff5555",  # red
    "#ffae42",  # orange
    "#f1fa8c",  # yellow
    "#50fa7b",  # green
    "#8be9fd",  # blue (cyan-ish for contrast)
    "#bd93f9",  # violet
)

RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Attributes:
        palette: Ordered colors; spans reference them by index only
        delimiter_opacity: Intensity hint for the delimiter channel
        debounce_seconds: Delay between a trigger and the rescan it schedules
        raw_text_elements: Elements whose body is never scanned for tags
        void_elements: Elements that never open a scope

    """

    palette: tuple[str, ...] = RAINBOW_COLORS
    delimiter_opacity: float = 0.70
    debounce_seconds: float = 0.1
    raw_text_elements: frozenset[str] = RAW_TEXT_ELEMENTS
    void_elements: frozenset[str] = VOID_ELEMENTS

    def __post_init__(self) -> None:
        if not self.palette:
            raise ConfigError("palette", "must contain at least one color")
        if not 0.0 <= self.delimiter_opacity <= 1.0:
            raise ConfigError(
                "delimiter_opacity", f"must be within [0, 1], got {self.delimiter_opacity!r}"
            )
        if self.debounce_seconds < 0:
            raise ConfigError(
                "debounce_seconds", f"must not be negative, got {self.debounce_seconds!r}"
            )

    @property
    def palette_size(self) -> int:
        """Number of colors in the palette."""
        return len(self.palette)

    def intensity_for(self, channel: Channel) -> float:
        """Rendering intensity for a channel (names are always full strength)."""
        if channel is Channel.DELIMITER:
            return self.delimiter_opacity
        return 1.0

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> HighlightConfig:
        """Create HighlightConfig from dictionary.

        Unknown keys are silently ignored. Sequence values for the palette and
        element sets are normalized to the field types.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "palette": ["#111", "#222"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.palette_size
            2

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "palette" in filtered:
            filtered["palette"] = tuple(filtered["palette"])
        for key in ("raw_text_elements", "void_elements"):
            if key in filtered:
                filtered[key] = frozenset(name.lower() for name in filtered[key])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context."""
    _highlight_config.set(config)


def reset_config() -> None:
    """Reset to the default configuration singleton."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: HighlightConfig) -> Iterator[HighlightConfig]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(HighlightConfig(palette=("#000", "#fff"))):
        ...     get_config().palette_size
        2

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield config
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "RAINBOW_COLORS",
    "RAW_TEXT_ELEMENTS",
    "VOID_ELEMENTS",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
