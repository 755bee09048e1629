"""Core modules for aigcw.

This module contains the core functionality including:
- Git argument parsing and reconstruction
- Git operations
"""

from .args import CommitInvocation, PassthroughInvocation, parse_git_args
from .git import GitError, GitOperations, NoStagedChangesError, VCSProcessError

__all__ = [
    "CommitInvocation",
    "PassthroughInvocation",
    "parse_git_args",
    "GitOperations",
    "GitError",
    "NoStagedChangesError",
    "VCSProcessError",
]
