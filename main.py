"""
NoteLens server entry point.

Run with: python main.py
Or with uvicorn: uvicorn app:app --reload

NOTELENS_HOST and NOTELENS_PORT choose the bind address;
NOTELENS_RELOAD=true restarts the server on code changes.
"""

import os

import uvicorn

from notelens.utils import ConfigurationError


def server_options() -> dict:
    """Uvicorn options read from the environment."""
    port = os.getenv("NOTELENS_PORT", "8000")
    if not port.isdigit():
        raise ConfigurationError(f"Invalid NOTELENS_PORT: {port!r}", context={"key": "NOTELENS_PORT"})

    return {
        "host": os.getenv("NOTELENS_HOST", "127.0.0.1"),
        "port": int(port),
        "reload": os.getenv("NOTELENS_RELOAD", "false").lower() in ("true", "1", "yes"),
        "log_level": os.getenv("NOTELENS_LOG_LEVEL", "INFO").lower(),
    }


if __name__ == "__main__":
    uvicorn.run("app:app", **server_options())
