"""Scan policy configuration."""

from __future__ import annotations

from dataclasses import dataclass

from filetree.errors import ConfigError

DEFAULT_MAX_DEPTH = 15
DEFAULT_CONCURRENT_OPS = 5


@dataclass(frozen=True, slots=True)
class Config:
    """Policy bundle consumed by the scanner.

    Attributes:
        max_depth: Deepest directory level whose entries are listed.
            The root is level 0. A negative value means unlimited,
            still bounded by the scanner's hard depth ceiling.
        show_hidden: Whether to include entries starting with ``.``.
        sort_dirs_first: Whether to list directories before files, each
            group in ordinal name order. When ``False`` the filesystem
            enumeration order is kept.
        show_size: Reserved. Accepted but not used by traversal.
        concurrent_ops: Reserved. Traversal is always single-threaded.
        exclude_patterns: fnmatch patterns matched against entry names.
        gitignore: Whether to honor the ``.gitignore`` at the scan root.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    show_hidden: bool = False
    sort_dirs_first: bool = True
    show_size: bool = False
    concurrent_ops: int = DEFAULT_CONCURRENT_OPS
    exclude_patterns: tuple[str, ...] = ()
    gitignore: bool = False

    def __post_init__(self) -> None:
        if self.concurrent_ops < 1:
            raise ConfigError(
                f"concurrent_ops must be at least 1, got {self.concurrent_ops}"
            )

    @property
    def unlimited_depth(self) -> bool:
        return self.max_depth < 0


def default_config() -> Config:
    """Return the default policy: depth 15, hidden entries off, dirs first."""
    return Config()
