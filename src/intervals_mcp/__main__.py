"""
Entry point for running intervals_mcp as a module.

Usage:
    python -m intervals_mcp                       # Run with stdio transport
    python -m intervals_mcp serve --http          # Run with HTTP transport
    python -m intervals_mcp serve --http --port 9000
    python -m intervals_mcp verify                # Check credentials and exit

ATHLETE_ID and API_KEY must be set in the environment or in a .env file.
"""

import argparse
import logging
import sys

from intervals_mcp import __version__, create_app
from intervals_mcp.client_factory import create_client
from intervals_mcp.config import Config, ConfigError, load_config
from intervals_mcp.sdk import athlete as sdk_athlete
from intervals_mcp.sdk.exceptions import IntervalsError

logger = logging.getLogger("intervals_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intervals-mcp",
        description="MCP Server for the Intervals.icu API",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "verify",
        help="Verify the setup by fetching the athlete profile",
    )

    serve = subparsers.add_parser("serve", help="Start the MCP server (default)")
    serve.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    serve.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: MCP_HOST or 0.0.0.0)"
    )
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for HTTP transport (default: MCP_PORT or 8081)"
    )
    return parser


def verify(config: Config) -> int:
    """Fetch the athlete profile once and report the outcome."""
    print(f"Verifying connection for Athlete ID: {config.athlete_id}...")
    client = create_client(config)
    try:
        athlete = sdk_athlete.get_athlete_profile(client)
    except (IntervalsError, ValueError) as e:
        print("Connection failed.", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    print("Connection successful!")
    print(f"Athlete: {athlete.firstname} {athlete.lastname} ({athlete.id})")
    print(f"City: {athlete.city}, {athlete.country}")
    return 0


def serve(config: Config, http: bool = False, host: str = None, port: int = None) -> int:
    """Start the MCP server; blocks until the transport closes."""
    app = create_app()

    if http or config.transport == "http":
        host = host or config.host
        port = port or config.port
        # stdout is free in http mode
        print(f"Starting Intervals.icu MCP server on http://{host}:{port}/mcp")
        app.run(transport="http", host=host, port=port)
    else:
        app.run()
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Logs go to stderr: stdout carries the stdio transport
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "verify":
        sys.exit(verify(config))

    try:
        code = serve(
            config,
            http=getattr(args, "http", False),
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
