"""rcman entry point."""

import argparse
import logging
from importlib.metadata import version as get_version

from rcman.config import get_settings
from rcman.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="rcman - desktop backend for the rclone remote-control daemon",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rcman serve                        Start the API server
  rcman serve --port 9000 --dev      Start with auto-reload on port 9000
""",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the API server (default: RCMAN_API_HOST or 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Port for the API server (default: RCMAN_API_PORT or 8899)",
    )
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {get_version('rcman')}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=["serve"],
        help="Subcommand: 'serve' starts the API server (default)",
    )

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(level="DEBUG" if args.dev else settings.log_level)

    from rcman.api.serve import run_api_server

    run_api_server(
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        dev=args.dev,
    )


if __name__ == "__main__":
    main()
