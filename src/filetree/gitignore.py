"""Gitignore integration: match scan entries against the root ``.gitignore``."""

from __future__ import annotations

import logging
import os

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


class GitignoreMatcher:
    """Match child paths of one scan root against its ``.gitignore``."""

    def __init__(self, root: str, spec: GitIgnoreSpec) -> None:
        self._root = root
        self._spec = spec

    def is_ignored(self, path: str, is_dir: bool) -> bool:
        """Return whether ``path`` (below the root) is ignored.

        Directories are matched with a trailing slash so that patterns
        such as ``build/`` apply to them.
        """
        rel = os.path.relpath(path, self._root).replace(os.sep, "/")
        if is_dir:
            rel += "/"
        return self._spec.match_file(rel)


def load_gitignore(root: str) -> GitignoreMatcher | None:
    """Load ``.gitignore`` patterns from the ``root`` directory.

    Returns:
        A matcher when the file exists and is readable, otherwise ``None``.
    """
    gitignore_path = os.path.join(root, ".gitignore")
    try:
        with open(gitignore_path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except OSError:
        logger.debug("Cannot read .gitignore: %s", gitignore_path)
        return None
    return GitignoreMatcher(root, GitIgnoreSpec.from_lines(lines))
