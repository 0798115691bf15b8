"""
Greeter - Main Entry Point

Serves the /hello application with uvicorn.
"""

import asyncio
import os
import sys

import uvicorn
from fastapi import FastAPI

from greeter_api.logger import greeter_logger as logger


def build_server_config(app: FastAPI) -> uvicorn.Config:
    """Build the uvicorn configuration from the HOST and PORT env vars."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))

    return uvicorn.Config(
        app=app,
        host=host,
        port=port,
        log_level="info",
        access_log=True
    )


async def start_server():
    """Start the greeter server."""

    try:
        from app import app

        config = build_server_config(app)
        logger.info(f"Starting greeter server on {config.host}:{config.port}")

        server = uvicorn.Server(config)
        await server.serve()

    except Exception as e:
        logger.error(f"Failed to start greeter server: {e}")
        raise


def main():
    """Main entry point for the greeter service."""

    try:
        asyncio.run(start_server())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error(f"Server execution failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
