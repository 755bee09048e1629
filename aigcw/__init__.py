"""aigcw - AI-powered git commit wrapper."""

from .cli.main import GitWrapper
from .core.args import CommitInvocation, PassthroughInvocation, parse_git_args
from .core.git import GitError, GitOperations
from .services.ai_service import AIService

__version__ = "0.1.0"

__all__ = [
    "GitWrapper",
    "CommitInvocation",
    "PassthroughInvocation",
    "parse_git_args",
    "GitOperations",
    "GitError",
    "AIService",
]
