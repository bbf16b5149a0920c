#!/usr/bin/env python3
"""Startup script for the Skull King scorekeeper API"""

import uvicorn

from .config import load_config


def main():
    config = load_config()

    print(f"Starting Skull King Scorekeeper API on {config.host}:{config.port}")
    print(f"Health check available at: http://{config.host}:{config.port}/health")

    uvicorn.run(
        "skullking_engine.main:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
