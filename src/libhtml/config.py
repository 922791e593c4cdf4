"""ContextVar-based render configuration for libhtml.

Provides per-context configuration using Python's ContextVars (PEP 567).
``HtmlRenderer`` installs its config for the duration of a render; Tags read
it while serializing their attributes.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent renders with different configs never see each other's values.

Usage:
    # Through a renderer (recommended)
    renderer = HtmlRenderer(RenderConfig(sort_attributes=True))
    html = renderer.render(page)

    # Direct node rendering with a temporary config
    with render_config_context(RenderConfig(escape_attribute_values=True)):
        page.render(sink)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    The defaults reproduce the plain serialization rules: attributes in
    insertion order, values written verbatim.

    Attributes:
        sort_attributes: Emit attributes sorted by key instead of insertion order
        escape_attribute_values: Pass attribute values through escape_html
        encoding: Encoding used when rendering into a binary stream

    """

    sort_attributes: bool = False
    escape_attribute_values: bool = False
    encoding: str = "utf-8"

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
            ...     "sort_attributes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.sort_attributes
            True

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
    """Get current render configuration.

    Returns:
        The active RenderConfig for this thread/context.

    """
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(sort_attributes=True)):
        ...     html = str(page)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

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
