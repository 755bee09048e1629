"""Classification and reconstruction of git command-line arguments."""

from dataclasses import dataclass

COMMIT_COMMAND = "commit"


@dataclass(frozen=True)
class PassthroughInvocation:
    """Any git invocation that is forwarded untouched."""

    args: tuple[str, ...]


@dataclass(frozen=True)
class CommitInvocation:
    """A ``git commit`` invocation with its message flags pulled out.

    ``message`` is ``None`` when no message flag was given and ``""`` when one
    was given with an empty value.
    """

    all: bool = False
    message: str | None = None
    patch: bool = False
    amend: bool = False
    extra_args: tuple[str, ...] = ()
    raw_args: tuple[str, ...] = ()

    def build_args(self, message: str | None = None) -> list[str]:
        """Rebuild the git argv, substituting ``message`` when given."""
        args = [COMMIT_COMMAND]
        if self.all:
            args.append("--all")
        if self.patch:
            args.append("--patch")
        if self.amend:
            args.append("--amend")
        if message is not None:
            args.extend(["-m", message])
        args.extend(self.extra_args)
        return args


GitInvocation = CommitInvocation | PassthroughInvocation


def parse_git_args(args: list[str]) -> GitInvocation:
    """Classify ``args`` (argv without the program name)."""
    if not args or args[0] != COMMIT_COMMAND:
        return PassthroughInvocation(args=tuple(args))

    all_ = patch = amend = False
    message = None
    extra_args = []

    tokens = iter(args[1:])
    for arg in tokens:
        if arg in ("-a", "--all"):
            all_ = True
        elif arg in ("-p", "--patch"):
            patch = True
        elif arg == "--amend":
            amend = True
        elif arg in ("-m", "--message"):
            # A trailing flag without a value means no message at all
            message = next(tokens, None)
        elif arg.startswith("--message="):
            message = arg[len("--message="):]
        elif arg.startswith("-m"):
            message = arg[2:]
        else:
            extra_args.append(arg)

    return CommitInvocation(
        all=all_,
        message=message,
        patch=patch,
        amend=amend,
        extra_args=tuple(extra_args),
        raw_args=tuple(args),
    )
