"""
Client factory for the Intervals.icu MCP server.

The server acts for a single athlete configured through the environment,
so every tool shares one IntervalsClient built on first use.
"""

from functools import lru_cache

from intervals_mcp.config import Config, load_config
from intervals_mcp.sdk.client import IntervalsClient


def create_client(config: Config) -> IntervalsClient:
    """Build an IntervalsClient from configuration."""
    return IntervalsClient(
        athlete_id=config.athlete_id,
        api_key=config.api_key,
        base_url=config.api_url,
        timeout=config.timeout,
    )


@lru_cache(maxsize=1)
def get_client() -> IntervalsClient:
    """
    Get the configured Intervals.icu client (lazy initialization).

    Usage in tools:
        @app.tool()
        async def list_workouts() -> str:
            client = get_client()
            return to_json(await anyio.to_thread.run_sync(sdk_workouts.get_workouts, client))

    Raises:
        ConfigError: If ATHLETE_ID or API_KEY is not configured
    """
    return create_client(load_config())
