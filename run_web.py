#!/usr/bin/env python3
"""
Launch script for the host diff web API.

This script starts the FastAPI server.
"""

import sys
import os
from pathlib import Path

from config import HostDiffSettings

project_root = Path(__file__).parent


def main():
    """Start the web server."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed.")
        print("Please run: pip install uvicorn[standard] fastapi python-multipart")
        sys.exit(1)

    settings = HostDiffSettings.from_env()

    print("Starting Host Diff API...")
    print("=" * 60)
    print()
    print(f"  API:       http://{settings.server.host}:{settings.server.port}/api")
    print(f"  API Docs:  http://{settings.server.host}:{settings.server.port}/docs")
    print(f"  Database:  {settings.storage.db_path}")
    print()
    print("=" * 60)
    print()
    print("Press CTRL+C to stop the server")
    print()

    # Change to project directory
    os.chdir(project_root)

    uvicorn.run(
        "api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
