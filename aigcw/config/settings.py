"""Application settings for aigcw."""

import logging
import os
import sys
import tomllib
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

import click
from dotenv import load_dotenv

APP_NAME = "aigcw"
CONFIG_FILE_NAME = "config.toml"

# Load environment variables at module level
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error."""

    pass


class ConfigIOError(ConfigError):
    """Configuration file could not be read or written."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file is malformed or incomplete."""

    pass


class LLMProvider(Enum):
    """Supported LLM backends."""

    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"
    OLLAMA = "Ollama"
    DEEPSEEK = "DeepSeek"
    XAI = "XAI"
    PHIND = "Phind"
    GOOGLE = "Google"
    GROQ = "Groq"
    CUSTOM = "Custom"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


def default_config_version() -> int:
    """Current version of the config file layout."""
    return 1


@dataclass(frozen=True)
class LLMSettings:
    """LLM provider settings from the ``[llm_config]`` table."""

    provider: LLMProvider = LLMProvider.OPENAI
    enabled: bool = False
    api_key: str | None = None
    url: str | None = None
    model: str | None = None
    timeout: float | None = None
    system: str | None = None

    @property
    def is_custom(self) -> bool:
        return self.provider is LLMProvider.CUSTOM

    def validate(self) -> None:
        """Check that the keys required by the provider are present."""
        if self.is_custom:
            required = ("url", "api_key")
        else:
            required = ("api_key", "model")

        missing = [key for key in required if not getattr(self, key)]
        if missing:
            raise ConfigParseError(
                f"llm_config for provider {self.provider.value} is missing: {', '.join(missing)}"
            )


@dataclass(frozen=True)
class AppConfig:
    """Contents of ``config.toml``."""

    config_version: int
    llm_config: LLMSettings

    @classmethod
    def default(cls) -> "AppConfig":
        return cls(config_version=default_config_version(), llm_config=LLMSettings())

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create configuration from parsed TOML data."""
        llm = data.get("llm_config")
        if not isinstance(llm, dict):
            raise ConfigParseError("Missing [llm_config] table")

        try:
            provider = LLMProvider(llm["provider"])
        except KeyError as e:
            raise ConfigParseError("llm_config.provider is required") from e
        except ValueError as e:
            raise ConfigParseError(f"Unknown LLM provider: {llm['provider']!r}") from e

        if "enable" not in llm:
            raise ConfigParseError("llm_config.enable is required")
        if not isinstance(llm["enable"], bool):
            raise ConfigParseError("llm_config.enable must be a boolean")

        timeout = llm.get("timeout")
        if timeout is not None and not isinstance(timeout, int | float):
            raise ConfigParseError("llm_config.timeout must be a number of seconds")

        config_version = data.get("config_version", default_config_version())
        if isinstance(config_version, bool) or not isinstance(config_version, int):
            raise ConfigParseError("config_version must be an integer")

        return cls(
            config_version=config_version,
            llm_config=LLMSettings(
                provider=provider,
                enabled=llm["enable"],
                api_key=llm.get("api_key"),
                url=llm.get("url"),
                model=llm.get("model"),
                timeout=timeout,
                system=llm.get("system"),
            ),
        )

    def to_toml(self) -> str:
        """Serialize the keys written on first run."""
        llm = self.llm_config
        lines = [
            f"config_version = {self.config_version}",
            "",
            "[llm_config]",
            f'provider = "{llm.provider.value}"',
            f"enable = {'true' if llm.enabled else 'false'}",
        ]
        return "\n".join(lines) + "\n"


def get_config_dir() -> Path:
    """Return the per-user configuration directory."""
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(click.get_app_dir(APP_NAME))


def get_config_path() -> Path:
    """Return the path of ``config.toml``, creating its directory if needed."""
    config_dir = get_config_dir()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(f"Cannot create config directory {config_dir}: {e}") from e
    return config_dir / CONFIG_FILE_NAME


def apply_env_overrides(settings: LLMSettings) -> LLMSettings:
    """Override file values with AIGCW_* environment variables."""
    overrides = {}
    for key, env_name in (("api_key", "AIGCW_API_KEY"), ("model", "AIGCW_MODEL"), ("url", "AIGCW_URL")):
        value = os.getenv(env_name)
        if value:
            overrides[key] = value
    return replace(settings, **overrides) if overrides else settings


def load_app_config(path: Path | None = None) -> AppConfig:
    """Load ``config.toml``, writing the defaults if it does not exist."""
    config_path = path or get_config_path()

    if not config_path.exists():
        config = AppConfig.default()
        logger.info("Creating default config at %s", config_path)
        try:
            config_path.write_text(config.to_toml(), encoding="utf-8")
        except OSError as e:
            raise ConfigIOError(f"Cannot write config file {config_path}: {e}") from e
        return replace(config, llm_config=apply_env_overrides(config.llm_config))

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML in {config_path}: {e}") from e

    config = AppConfig.from_dict(data)
    if config.config_version < default_config_version():
        logger.warning(
            "Config file %s is outdated (v%d, current v%d)",
            config_path,
            config.config_version,
            default_config_version(),
        )
    return replace(config, llm_config=apply_env_overrides(config.llm_config))
