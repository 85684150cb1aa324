"""ContextVar-based scan configuration for slicewise.

Provides context-local configuration using Python's ContextVars (PEP 567).
Cursors and line rules read their defaults from the active config when they
are constructed; an explicit constructor argument always wins.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from slicewise.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(pragma_keyword="#PRAGMA")):
        rule = PragmaRule()  # picks up the custom keyword

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        auto_trim: Cursors trim their slice after every consuming apply()
        inline_comment_marker: Marker that opens an inline comment
        block_comment_open: Marker that opens a block comment
        block_comment_close: Marker that closes a block comment
        pragma_keyword: Directive keyword matched by PragmaRule (case-insensitive)
        pragma_macro_keyword: Operator matched by PragmaMacroRule

    """

    auto_trim: bool = True
    inline_comment_marker: str = "//"
    block_comment_open: str = "/*"
    block_comment_close: str = "*/"
    pragma_keyword: str = "#pragma"
    pragma_macro_keyword: str = "_Pragma"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"auto_trim": False, "other": 1})
            >>> config.auto_trim
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(auto_trim=False)):
        ...     cursor = Cursor("  text  ")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
