"""
Process configuration for the Intervals.icu MCP server.

Values come from environment variables, optionally loaded from a .env file
in the working directory:

- ATHLETE_ID (required): Intervals.icu athlete ID, e.g. "i12345"
- API_KEY (required): Intervals.icu API key (Settings > Developer)
- INTERVALS_API_URL: API base URL (default: https://intervals.icu/api/v1)
- INTERVALS_TIMEOUT: Request timeout in seconds (default: 30)
- LOG_LEVEL: Logging level (default: INFO)
- MCP_TRANSPORT: 'stdio' (default) or 'http'
- MCP_HOST: Host to bind to (default: '0.0.0.0')
- MCP_PORT: Port for HTTP transport (default: 8081)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from intervals_mcp.sdk.types import API_URL, DEFAULT_TIMEOUT


class ConfigError(Exception):
    """Required configuration is missing or invalid."""


@dataclass(frozen=True)
class Config:
    athlete_id: str
    api_key: str
    api_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 8081

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks
        return f"Config(athlete_id={self.athlete_id!r}, api_url={self.api_url!r}, transport={self.transport!r})"


def load_config() -> Config:
    """
    Load configuration from the environment (and .env, if present).

    Raises:
        ConfigError: If ATHLETE_ID or API_KEY is missing, or a numeric value is invalid
    """
    load_dotenv()

    athlete_id = os.environ.get("ATHLETE_ID", "").strip()
    api_key = os.environ.get("API_KEY", "").strip()
    if not athlete_id or not api_key:
        raise ConfigError(
            "ATHLETE_ID and API_KEY must be set in environment variables (or .env file)."
        )

    return Config(
        athlete_id=athlete_id,
        api_key=api_key,
        api_url=os.environ.get("INTERVALS_API_URL", API_URL),
        timeout=_number("INTERVALS_TIMEOUT", DEFAULT_TIMEOUT, float),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        transport=os.environ.get("MCP_TRANSPORT", "stdio"),
        host=os.environ.get("MCP_HOST", "0.0.0.0"),
        port=_number("MCP_PORT", 8081, int),
    )


def _number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
