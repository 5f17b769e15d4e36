"""filetree — bounded, cancellable directory scanner with box-drawing output."""

from filetree.config import Config, default_config
from filetree.context import ScanContext
from filetree.errors import (
    ConfigError,
    DirectoryReadError,
    FileTreeError,
    RootNotDirectoryError,
    RootNotFoundError,
    ScanCancelledError,
    ScanDeadlineExceededError,
    ScanInputError,
    ScanInterruptedError,
    StatError,
)
from filetree.node import ScanResult, TreeNode
from filetree.renderer import RenderOptions, render
from filetree.scanner import scan

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "DirectoryReadError",
    "FileTreeError",
    "RenderOptions",
    "RootNotDirectoryError",
    "RootNotFoundError",
    "ScanCancelledError",
    "ScanContext",
    "ScanDeadlineExceededError",
    "ScanInputError",
    "ScanInterruptedError",
    "ScanResult",
    "StatError",
    "TreeNode",
    "default_config",
    "render",
    "scan",
]
