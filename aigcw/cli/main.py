"""Main CLI module for aigcw."""

import logging

from ..config.commit_types import load_commit_types
from ..config.settings import load_app_config
from ..core.args import CommitInvocation, PassthroughInvocation, parse_git_args
from ..core.git import GitOperations
from ..services.ai_service import AIService, LLMEmptyResponseError
from . import console

logger = logging.getLogger(__name__)


class CommitAbortedError(Exception):
    """The user gave no commit message."""

    pass


class GitWrapper:
    """Intercepts ``git commit -m`` and forwards everything else to git."""

    def __init__(self):
        self.git = GitOperations()

    def run(self, argv: list[str]) -> int:
        """Run git for ``argv`` and return its exit code."""
        invocation = parse_git_args(argv)
        logger.debug("Parsed invocation: %s", invocation)

        if isinstance(invocation, PassthroughInvocation):
            return self.git.execute(list(invocation.args))
        if invocation.message is None:
            return self.git.execute(list(invocation.raw_args))

        return self.git.execute(self.build_commit_args(invocation))

    def build_commit_args(self, invocation: CommitInvocation) -> list[str]:
        """Select a commit type, fill in the message and rebuild the argv."""
        labels = load_commit_types().labels()
        label = console.select_commit_type(labels)

        message = invocation.message
        if not message:
            message = self.generate_message(label)
            console.print_commit_message(f"{label} {message}")

        args = invocation.build_args(f"{label} {message}")
        logger.debug("Final git args: %s", args)
        return args

    def generate_message(self, label: str) -> str:
        """Draft a message from the staged diff, asking the user as a fallback."""
        diff = self.git.get_staged_diff()
        settings = load_app_config().llm_config

        try:
            message = AIService(settings).generate_commit_message(label, diff)
        except LLMEmptyResponseError as e:
            console.print_warning(f"{e}. Please type the message.")
            message = ""
        else:
            if not message:
                console.print_info("LLM integration is disabled. Please type the message.")

        if not message:
            message = console.prompt_message()
        if not message:
            raise CommitAbortedError("Aborting commit due to empty commit message.")
        return message
