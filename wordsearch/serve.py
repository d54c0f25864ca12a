"""
Standalone CLI for serving the built front end.

Usage:
    python -m wordsearch.serve
    python -m wordsearch.serve --port 8080 --dist build
    PORT=8080 python -m wordsearch.serve
"""

import argparse
import sys
from pathlib import Path

from .server import ServerConfig, run


def main():
    parser = argparse.ArgumentParser(
        description="Serve the word search front end with SPA fallback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordsearch.serve
  python -m wordsearch.serve --dist dist --port 5000
        """
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Port to listen on (default: $PORT or 5000)"
    )
    parser.add_argument(
        "--host",
        help="Interface to bind (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--dist", "-d",
        help="Directory holding the built assets (default: dist)"
    )

    args = parser.parse_args()

    overrides = {}
    if args.port is not None:
        overrides["port"] = args.port
    if args.host:
        overrides["host"] = args.host
    if args.dist:
        overrides["dist_dir"] = Path(args.dist)

    config = ServerConfig(**overrides)

    if not config.dist_dir.is_dir():
        print(f"Error: Asset directory not found: {config.dist_dir}", file=sys.stderr)
        sys.exit(1)

    try:
        run(config)
    except KeyboardInterrupt:
        print("\nServer stopped")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    sys.exit(main())
