"""Git operations module."""

import logging
import subprocess

logger = logging.getLogger(__name__)

GIT_BINARY = "git"


class GitError(Exception):
    """Git operation error."""

    pass


class VCSProcessError(GitError):
    """A git subprocess exited unsuccessfully."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        if self.returncode is None or self.returncode <= 0:
            return 1
        return self.returncode


class NoStagedChangesError(GitError):
    """There is nothing staged to commit."""

    pass


class GitOperations:
    """Basic git operations handler."""

    @staticmethod
    def get_staged_diff() -> str:
        """Get the diff of all staged changes."""
        try:
            result = subprocess.run(
                [GIT_BINARY, "diff", "--staged"],
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except FileNotFoundError as e:
            raise VCSProcessError(f"Failed to execute git diff --staged: {e}") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr if e.stderr else str(e)
            raise VCSProcessError(f"Git diff command failed: {error_msg}", e.returncode) from e

        if not result.stdout.strip():
            raise NoStagedChangesError("No staged changes detected.")
        return result.stdout

    @staticmethod
    def execute(args: list[str]) -> int:
        """Run git with ``args`` attached to the terminal and return its exit code."""
        logger.debug("Running git %s", args)
        try:
            completed = subprocess.run([GIT_BINARY, *args])
        except OSError as e:
            raise VCSProcessError(f"Failed to execute git: {e}") from e
        # Killed by a signal
        if completed.returncode < 0:
            return 1
        return completed.returncode
