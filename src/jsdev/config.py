"""ContextVar-based transform configuration for JSDev.

Provides context-local configuration using Python's ContextVars (PEP 567).
Set the macro table once, then every transform() call in the context
picks it up.

Usage:
    from jsdev.config import TransformConfig, transform_config_context
    from jsdev.macros import build_macro_table

    config = TransformConfig(macros=build_macro_table(["debug"]))
    with transform_config_context(config):
        result = transform("/*debug x=1*/")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from jsdev.macros import MacroTable, build_macro_table


@dataclass(frozen=True, slots=True)
class TransformConfig:
    """Immutable transform configuration.

    Attributes:
        macros: Macro table consulted for every block comment
        comments: Banner lines written as ``// <comment>`` before the output
        source_file: Source path used in error messages

    """

    macros: MacroTable = field(default_factory=lambda: build_macro_table(()))
    comments: tuple[str, ...] = ()
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TransformConfig":
        """Create TransformConfig from dictionary.

        ``macros`` may be a MacroTable or a list of ``name[:target]`` words.
        Unknown keys are silently ignored.

        Example:
            >>> config = TransformConfig.from_dict({
            ...     "macros": ["debug", "log:console.log"],
            ...     "comments": ["Devel Edition"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.macros.names
            ('debug', 'log')

        Raises:
            ConfigError: If a macro word is malformed
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        macros = filtered.get("macros")
        if macros is not None and not isinstance(macros, MacroTable):
            filtered["macros"] = build_macro_table(macros)
        if "comments" in filtered:
            filtered["comments"] = tuple(filtered["comments"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TransformConfig = TransformConfig()

_transform_config: ContextVar[TransformConfig] = ContextVar(
    "transform_config",
    default=_DEFAULT_CONFIG,
)


def get_transform_config() -> TransformConfig:
    """Get the active transform configuration."""
    return _transform_config.get()


def set_transform_config(config: TransformConfig) -> None:
    """Set transform configuration for the current context."""
    _transform_config.set(config)


def reset_transform_config() -> None:
    """Reset to the default (empty) configuration."""
    _transform_config.set(_DEFAULT_CONFIG)


@contextmanager
def transform_config_context(config: TransformConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with transform_config_context(TransformConfig.from_dict({"macros": ["debug"]})):
        ...     transform("/*debug x*/")
        '{x;}'
    """
    previous = _transform_config.get()
    _transform_config.set(config)
    try:
        yield
    finally:
        _transform_config.set(previous)


__all__ = [
    "TransformConfig",
    "get_transform_config",
    "set_transform_config",
    "reset_transform_config",
    "transform_config_context",
]
