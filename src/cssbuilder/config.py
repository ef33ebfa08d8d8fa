"""ContextVar-based build configuration for cssbuilder.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Selectors read the active config at call time, so a config set around a
chain of builder calls applies to every fragment added inside it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from cssbuilder.config import BuildConfig, build_config_context

    with build_config_context(BuildConfig(reject_empty_values=True)):
        selector = css_selector_builder.element("div").class_("")  # raises

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from cssbuilder.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable build configuration.

    Attributes:
        strict_combinators: Reject combinator tokens other than
            " ", "+", "~" and ">" in combine()
        reject_empty_values: Raise ValidationError when a fragment
            value is the empty string

    """

    strict_combinators: bool = True
    reject_empty_values: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuildConfig":
        """Create BuildConfig from dictionary.

        Only includes keys that are valid BuildConfig fields; unknown keys
        are ignored (and reported at DEBUG level).

        Example:
            >>> config = BuildConfig.from_dict({
            ...     "strict_combinators": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_combinators
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        ignored = sorted(k for k in config_dict if k not in valid_fields)
        if ignored:
            logger.debug("Ignoring unknown BuildConfig keys: %s", ", ".join(ignored))
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuildConfig = BuildConfig()

_build_config: ContextVar[BuildConfig] = ContextVar(
    "build_config",
    default=_DEFAULT_CONFIG,
)


def get_build_config() -> BuildConfig:
    """Get current build configuration (thread-local)."""
    return _build_config.get()


def set_build_config(config: BuildConfig) -> None:
    """Set build configuration for current context.

    Only affects the current thread's context.
    """
    _build_config.set(config)


def reset_build_config() -> None:
    """Reset to the module-level default configuration."""
    _build_config.set(_DEFAULT_CONFIG)


@contextmanager
def build_config_context(config: BuildConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with build_config_context(BuildConfig(strict_combinators=False)):
        ...     get_build_config().strict_combinators
        False
        >>> get_build_config().strict_combinators
        True

    """
    previous = _build_config.get()
    _build_config.set(config)
    try:
        yield
    finally:
        _build_config.set(previous)


__all__ = [
    "BuildConfig",
    "build_config_context",
    "get_build_config",
    "reset_build_config",
    "set_build_config",
]
