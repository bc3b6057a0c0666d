#!/usr/bin/env python
"""
Run the blog API server.

Usage:
    python run_api.py
    python run_api.py --reload           # Development mode
    python run_api.py --storage memory   # No Supabase needed
"""

import argparse
import os

import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run the blog API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--storage",
        choices=["supabase", "memory"],
        help="Credential store backend (overrides STORAGE_BACKEND)",
    )
    args = parser.parse_args()

    if args.storage:
        # Read by the settings loaded in the server process, including reload workers.
        os.environ["STORAGE_BACKEND"] = args.storage
        get_settings.cache_clear()

    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
