"""Entry exclusion: reserved system paths, fnmatch patterns and presets."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Final

# Substrings of OS-reserved locations that are never scanned. Matched
# against the full child path, so Windows separators are kept verbatim.
RESERVED_PATH_PARTS: Final[tuple[str, ...]] = (
    "System Volume Information",
    "$Recycle.Bin",
    "$WINDOWS.~BT",
    "Recovery",
    "ProgramData\\Microsoft\\Windows Defender",
    "Windows\\System32\\config",
)

PRESETS: Final[dict[str, tuple[str, ...]]] = {
    "python": (
        "__pycache__",
        ".venv",
        "venv",
        "*.pyc",
        ".pytest_cache",
        ".mypy_cache",
        "*.egg-info",
    ),
    "node": (
        "node_modules",
        ".next",
        ".cache",
        "coverage",
    ),
    "rust": ("target",),
    "generic": (
        ".git",
        ".DS_Store",
        "Thumbs.db",
        "desktop.ini",
    ),
}


def is_reserved_path(path: str) -> bool:
    """Return whether ``path`` contains any reserved system path part."""
    return any(part in path for part in RESERVED_PATH_PARTS)


class PatternFilter:
    """Exclude entries whose name matches any fnmatch pattern.

    Matching is case-sensitive on every platform so results do not
    depend on the host filesystem. A pattern ending in ``/`` only
    matches directories.
    """

    def __init__(self, patterns: list[str] | tuple[str, ...] | None = None) -> None:
        self._patterns: tuple[str, ...] = tuple(patterns) if patterns else ()

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def should_exclude(self, name: str, is_dir: bool) -> bool:
        for pat in self._patterns:
            if pat.endswith("/"):
                if is_dir and fnmatchcase(name, pat.rstrip("/")):
                    return True
            elif fnmatchcase(name, pat):
                return True
        return False


def get_preset_patterns(name: str) -> list[str]:
    """Return exclusion patterns for a named preset.

    ``generic`` is always merged in ahead of the requested preset.

    Args:
        name: Preset name.

    Returns:
        list[str]: Combined pattern list without duplicates.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset '{name}'. Known presets: {known}")

    patterns = list(PRESETS["generic"])
    for pattern in PRESETS[name]:
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns
