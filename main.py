import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv

from mochi_mcp import MochiClient, config, create_app
from mochi_mcp.log import configure_logging, get_logger

ROOT = Path(__file__).resolve().parent
DEFAULT_PORT = 8000

logger = get_logger("mochi_mcp.main")


def parse_args(argv=None):
    parser = ArgumentParser(description="MCP server for Mochi flashcards")
    parser.add_argument(
        "token",
        nargs="?",
        help="Mochi API key (defaults to MOCHI_API_KEY from the environment or .env)",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host for the http transport")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port for the http transport"
    )
    parser.add_argument(
        "--no-run",
        action="store_true",
        help="Check configuration and exit without starting the server",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    load_dotenv(ROOT / ".env")
    config.reload_from_env()
    configure_logging(config.LOG_LEVEL)

    token = config.resolve_api_key(args.token)
    if not token:
        print(
            "MOCHI_API_KEY is not set: pass the token as an argument or via the environment",
            file=sys.stderr,
        )
        return 1

    client = MochiClient(
        token, base_url=config.MOCHI_BASE_URL, timeout=config.MOCHI_TIMEOUT
    )
    if args.no_run:
        return 0

    app = create_app(client)
    logger.info("server_starting", transport=args.transport, base_url=client.base_url)
    if args.transport == "http":
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
