import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from figma_genui.core.errors import ConfigurationError

FIGMA_API_BASE = "https://api.figma.com/v1"
DEFAULT_LOG_FILE = "mcp-debug.log"
DEFAULT_API_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    default_file_key: str = ""
    api_base: str = FIGMA_API_BASE
    api_timeout: float = DEFAULT_API_TIMEOUT
    log_file: str = DEFAULT_LOG_FILE


def load_settings(env_file: str | None = None) -> Settings:
    """Read settings from the environment after loading ``.env``.

    Variables already set in the environment win over the ``.env`` file.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    api_key = os.getenv("FIGMA_API_KEY")
    if not api_key:
        raise ConfigurationError("FIGMA_API_KEY is required in .env file")

    raw_timeout = os.getenv("FIGMA_API_TIMEOUT", str(DEFAULT_API_TIMEOUT))
    try:
        api_timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"FIGMA_API_TIMEOUT must be a number, got {raw_timeout!r}") from None

    return Settings(
        api_key=api_key,
        default_file_key=os.getenv("FIGMA_DEFAULT_FILE", ""),
        api_base=os.getenv("FIGMA_API_BASE", FIGMA_API_BASE),
        api_timeout=api_timeout,
        log_file=os.getenv("FIGMA_GENUI_LOG_FILE", DEFAULT_LOG_FILE),
    )
