#!/usr/bin/env python3
"""Serve the audit catalog API with uvicorn.

Usage:
    python scripts/run_catalog_api.py --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import argparse
import os

import uvicorn

from audit_catalog.bootstrap import configure_structlog


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the audit catalog API.")
    parser.add_argument("--host", default=os.environ.get("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")))
    parser.add_argument(
        "--env",
        default=os.environ.get("ENVIRONMENT", "production"),
        choices=("development", "production"),
    )
    args = parser.parse_args()

    configure_structlog(args.env)
    uvicorn.run("audit_catalog.api.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
