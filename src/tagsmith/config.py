"""ContextVar-based render configuration for Tagsmith.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Node construction, rendering, byte streaming and file loading all read the
active config at call time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed for configuration. Nodes themselves are NOT
    synchronised; see ``tagsmith.node``.

Usage:
    from tagsmith import tag
    from tagsmith.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(strict_attributes=True, max_depth=64)):
        page = tag("div", "class", "glass")["Hello"]
        html = page.render()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        encoding: Text encoding used by ``stream_bytes`` and ``load_file``
            when the caller does not pass one
        strict_attributes: Raise ``MalformedAttributeListError`` for odd-length
            attribute lists instead of dropping the unpaired element
        max_depth: Maximum node nesting depth while rendering. ``None`` means
            unbounded; set it to turn accidental cycles into ``RenderDepthError``

    """

    encoding: str = "utf-8"
    strict_attributes: bool = False
    max_depth: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "encoding": "ascii",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'ascii'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local).

    Returns:
        The active RenderConfig for this thread/context.

    """
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(max_depth=8)):
        ...     html = page.render()

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
