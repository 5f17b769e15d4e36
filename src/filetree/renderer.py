"""Box-drawing text renderer for scanned trees."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from filetree.node import TreeNode

HEADER_RULE = "=" * 50
FOLDER_ICON = "\U0001f4c1"  # 📁
FILE_ICON = "\U0001f4c4"  # 📄


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Box-drawing character set for tree rendering."""

    branch: str  # ├──
    last_branch: str  # └──
    vertical: str  # │
    space: str  # (indent)


UNICODE_GLYPHS = Glyphs(
    branch="├── ",
    last_branch="└── ",
    vertical="│   ",
    space="    ",
)

ASCII_GLYPHS = Glyphs(
    branch="|-- ",
    last_branch="\\-- ",
    vertical="|   ",
    space="    ",
)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options for the renderer.

    Attributes:
        charset: Connector character set, ``unicode`` or ``ascii``.
    """

    charset: Literal["unicode", "ascii"] = "unicode"


def render(root: TreeNode | None, options: RenderOptions | None = None) -> str:
    """Render a scanned tree as box-drawing text.

    The root only contributes the header. Its first child is written
    flush-left without a connector and passes an empty prefix to its
    own children. Every other entry gets ``├──``/``└──`` under the
    inherited prefix.

    Args:
        root: Root node of a scanned tree, or ``None``.
        options: Rendering options.

    Returns:
        str: Header, rule, blank line and one line per non-root node.
        Empty string when ``root`` is ``None``.
    """
    if root is None:
        return ""

    opts = options or RenderOptions()
    glyphs = ASCII_GLYPHS if opts.charset == "ascii" else UNICODE_GLYPHS

    lines: list[str] = [f"File Tree for: {root.path}", HEADER_RULE, ""]

    # Iterative DFS using an explicit stack.
    # Stack items: (node, prefix, connector, child_prefix)
    stack: list[tuple[TreeNode, str, str, str]] = []
    _push_children(stack, root, "", glyphs, is_root=True)

    while stack:
        node, prefix, connector, child_prefix = stack.pop()
        lines.append(f"{prefix}{connector}{_entry_label(node)}")
        _push_children(stack, node, child_prefix, glyphs, is_root=False)

    return "\n".join(lines) + "\n"


def _push_children(
    stack: list[tuple[TreeNode, str, str, str]],
    node: TreeNode,
    prefix: str,
    glyphs: Glyphs,
    is_root: bool,
) -> None:
    """Push ``node``'s children so the first child is popped first."""
    last = len(node.children) - 1
    for i in range(last, -1, -1):
        if is_root and i == 0:
            connector, child_prefix = "", ""
        elif i == last:
            connector, child_prefix = glyphs.last_branch, prefix + glyphs.space
        else:
            connector, child_prefix = glyphs.branch, prefix + glyphs.vertical
        stack.append((node.children[i], prefix, connector, child_prefix))


def _entry_label(node: TreeNode) -> str:
    if node.is_dir:
        return f"{FOLDER_ICON} {node.name}/"
    return f"{FILE_ICON} {node.name}"


def default_filename(now: datetime | None = None) -> str:
    """Return the default save name ``file_tree_YYYY-MM-DD_HH-MM-SS.txt``."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    return f"file_tree_{stamp}.txt"
