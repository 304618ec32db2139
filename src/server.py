"""Uvicorn runner for the Attraction Reviews API.

Usage:
    python src/server.py                     # Serve on the configured port (3004)
    python src/server.py --port 8080 --reload
    python src/server.py --json-logs         # One JSON object per log line
"""

import argparse

import uvicorn
from reviews.utils.logging import configure_logging

DEFAULT_PORT = 3004


def _configured_port():
    from reviews.domain import reviews

    return reviews.config.get("custom", {}).get("SERVER_PORT", DEFAULT_PORT)


def main():
    parser = argparse.ArgumentParser(description="Attraction Reviews API server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: SERVER_PORT from domain.toml)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--log-level", default="info", help="Log level (default: info)")
    parser.add_argument("--json-logs", action="store_true", help="Render logs as JSON lines")
    args = parser.parse_args()

    configure_logging(level=args.log_level, json_logs=args.json_logs)

    port = args.port or _configured_port()
    uvicorn.run("app:app", host=args.host, port=port, reload=args.reload, log_level=args.log_level)


if __name__ == "__main__":
    main()
