"""Directory tree scanner: bounded, cancellable recursive traversal."""

from __future__ import annotations

import logging
import os
import stat
import time
from typing import Final

from filetree.config import Config, default_config
from filetree.context import ScanContext
from filetree.errors import (
    DirectoryReadError,
    FileTreeError,
    RootNotDirectoryError,
    RootNotFoundError,
    ScanInputError,
    ScanInterruptedError,
    StatError,
)
from filetree.filter import PatternFilter, is_reserved_path
from filetree.gitignore import GitignoreMatcher, load_gitignore
from filetree.node import ScanResult, TreeNode

logger = logging.getLogger(__name__)

# Hard recursion bound applied regardless of Config.max_depth.
MAX_SAFE_DEPTH: Final[int] = 50

# Directories listing more than ENTRY_LIMIT_TRIGGER entries are cut down
# to their first ENTRY_LIMIT_KEEP entries before filtering and sorting.
ENTRY_LIMIT_TRIGGER: Final[int] = 10_000
ENTRY_LIMIT_KEEP: Final[int] = 1_000

YIELD_EVERY: Final[int] = 100
YIELD_SECONDS: Final[float] = 0.001


def scan(
    context: ScanContext | None,
    root_path: str | os.PathLike[str],
    config: Config | None = None,
) -> ScanResult:
    """Scan ``root_path`` and return the tree with its node count.

    Args:
        context: Cancellation/deadline signal polled during traversal.
            ``None`` scans without cancellation or deadline.
        root_path: Directory to scan.
        config: Scan policy. Defaults to ``default_config()``.

    Returns:
        ScanResult: Root node and the number of nodes reachable from it.

    Raises:
        ScanInputError: If ``root_path`` is empty.
        RootNotFoundError: If the root does not exist or cannot be stat'ed.
        RootNotDirectoryError: If the root is not a directory.
        ScanCancelledError: If ``context`` was cancelled mid-scan.
        ScanDeadlineExceededError: If the ``context`` deadline passed.
    """
    path = os.fspath(root_path)
    if not path:
        raise ScanInputError("path cannot be empty")

    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        raise RootNotFoundError(path, exc.strerror or str(exc)) from exc
    except OSError as exc:
        raise StatError(path, exc.strerror or str(exc)) from exc

    if not stat.S_ISDIR(st.st_mode):
        raise RootNotDirectoryError(path)

    walker = _TreeWalker(
        context if context is not None else ScanContext(),
        config or default_config(),
        path,
    )
    root = TreeNode(path=path, name=_base_name(path), is_dir=True)
    node_count = 1 + walker.scan_node(root, 0)

    logger.debug("Scanned %d nodes from %s", node_count, path)
    return ScanResult(root_path=path, root=root, node_count=node_count)


def _base_name(path: str) -> str:
    name = os.path.basename(os.path.normpath(path))
    return name or path


class _TreeWalker:
    """Holds per-scan state for the recursive traversal."""

    def __init__(self, context: ScanContext, config: Config, root: str) -> None:
        self._context = context
        self._config = config
        self._patterns = PatternFilter(config.exclude_patterns)
        self._gitignore: GitignoreMatcher | None = (
            load_gitignore(root) if config.gitignore else None
        )

    def scan_node(self, node: TreeNode, depth: int) -> int:
        """Populate ``node.children`` and return the number of descendants.

        ``node`` itself is counted by the caller. Listing failures are
        logged and leave ``node`` as a leaf.

        Raises:
            ScanInterruptedError: When the context is cancelled or expired.
        """
        self._context.check()

        if not self._config.unlimited_depth and depth > self._config.max_depth:
            return 0

        if depth > MAX_SAFE_DEPTH:
            logger.warning(
                "Stopping scan at depth %d for path %s", depth, node.path
            )
            return 0

        try:
            entries = self._list_entries(node.path)
        except DirectoryReadError as exc:
            logger.warning("%s", exc)
            return 0

        if len(entries) > ENTRY_LIMIT_TRIGGER:
            logger.warning(
                "Directory %s has %d entries, limiting to first %d",
                node.path,
                len(entries),
                ENTRY_LIMIT_KEEP,
            )
            entries = entries[:ENTRY_LIMIT_KEEP]

        if not self._config.show_hidden:
            entries = [e for e in entries if not e[0].startswith(".")]

        if self._config.sort_dirs_first:
            # Directories first, then byte-wise order of the on-disk names.
            entries.sort(key=lambda e: (not e[1], os.fsencode(e[0])))

        count = 0
        for index, (name, is_dir) in enumerate(entries):
            self._context.check()

            if index > 0 and index % YIELD_EVERY == 0:
                time.sleep(YIELD_SECONDS)

            child_path = os.path.join(node.path, name)
            if self._is_excluded(child_path, name, is_dir):
                continue

            child = node.add_child(child_path, name, is_dir)
            count += 1
            if not is_dir:
                continue

            try:
                count += self.scan_node(child, depth + 1)
            except ScanInterruptedError:
                raise
            except FileTreeError as exc:
                logger.warning("Error scanning subdirectory %s: %s", child_path, exc)

        return count

    def _list_entries(self, path: str) -> list[tuple[str, bool]]:
        """Return ``(name, is_dir)`` pairs in enumeration order.

        Raises:
            DirectoryReadError: If the directory cannot be listed.
        """
        try:
            with os.scandir(path) as it:
                return [(entry.name, _entry_is_dir(entry)) for entry in it]
        except OSError as exc:
            raise DirectoryReadError(path, exc.strerror or str(exc)) from exc

    def _is_excluded(self, child_path: str, name: str, is_dir: bool) -> bool:
        if is_reserved_path(child_path):
            logger.debug("Skipping reserved path: %s", child_path)
            return True
        if self._patterns and self._patterns.should_exclude(name, is_dir):
            return True
        if self._gitignore is not None and self._gitignore.is_ignored(
            child_path, is_dir
        ):
            logger.debug("Ignored by .gitignore: %s", child_path)
            return True
        return False


def _entry_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        logger.debug("Cannot stat: %s", entry.path)
        return False
