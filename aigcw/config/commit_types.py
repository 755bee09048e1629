"""Commit type definitions shown in the type selector."""

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .settings import ConfigIOError, ConfigParseError

COMMIT_CONFIG_FILE = ".commitconfig.toml"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitTypeEntry:
    """A single selectable commit type."""

    name: str
    emoji: str
    description: str

    def label(self, with_emoji: bool = True) -> str:
        """Label used in the selector and as the commit message prefix."""
        if with_emoji and self.emoji:
            return f"{self.name}: {self.emoji}"
        return f"{self.name}:"


@dataclass(frozen=True)
class CommitTypesConfig:
    """Contents of ``.commitconfig.toml``."""

    emoji_enabled: bool
    types: tuple[CommitTypeEntry, ...]

    def labels(self) -> list[str]:
        return [entry.label(self.emoji_enabled) for entry in self.types]


def builtin_commit_types() -> tuple[CommitTypeEntry, ...]:
    """Conventional commit types used when no config file is present."""
    return (
        CommitTypeEntry("feat", "✨", "A new feature"),
        CommitTypeEntry("fix", "🐛", "A bug fix"),
        CommitTypeEntry("docs", "📚", "Documentation only changes"),
        CommitTypeEntry("style", "🎨", "Code style changes"),
        CommitTypeEntry("refactor", "♻️", "Code refactoring"),
        CommitTypeEntry("perf", "⚡️", "Performance improvements"),
        CommitTypeEntry("test", "✅", "Adding or updating tests"),
        CommitTypeEntry("build", "📦️", "Build system changes"),
        CommitTypeEntry("ci", "👷", "CI configuration changes"),
        CommitTypeEntry("chore", "🔧", "Other chores"),
        CommitTypeEntry("revert", "⏪️", "Revert a previous commit"),
    )


def _parse_types(data: dict, path: Path) -> CommitTypesConfig:
    emoji = data.get("emoji", {})
    if not isinstance(emoji, dict) or not isinstance(emoji.get("enable", True), bool):
        raise ConfigParseError(f"{path}: [emoji] must be a table with a boolean 'enable'")

    raw_types = data.get("types")
    if not isinstance(raw_types, list) or not raw_types:
        raise ConfigParseError(f"{path}: 'types' must be a non-empty array of tables")

    types = []
    for index, item in enumerate(raw_types):
        try:
            types.append(
                CommitTypeEntry(name=item["name"], emoji=item["emoji"], description=item["desc"])
            )
        except (KeyError, TypeError) as e:
            raise ConfigParseError(
                f"{path}: types[{index}] needs 'name', 'emoji' and 'desc'"
            ) from e

    return CommitTypesConfig(emoji_enabled=emoji.get("enable", True), types=tuple(types))


def load_commit_types(path: Path | None = None) -> CommitTypesConfig:
    """Load commit types from ``.commitconfig.toml`` or fall back to the builtins."""
    config_path = path or Path.cwd() / COMMIT_CONFIG_FILE

    if not config_path.exists():
        logger.debug("No %s found, using builtin commit types", config_path)
        return CommitTypesConfig(emoji_enabled=True, types=builtin_commit_types())

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(f"Cannot read {config_path}: {e}") from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML in {config_path}: {e}") from e

    return _parse_types(data, config_path)
