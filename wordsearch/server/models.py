"""Configuration model for the static asset server."""

import os
from pathlib import Path
from pydantic import BaseModel, Field


DEFAULT_PORT = 5000


def default_port() -> int:
    """Port from the PORT environment variable, else DEFAULT_PORT."""
    return int(os.environ.get("PORT", DEFAULT_PORT))


class ServerConfig(BaseModel):
    """Where the built assets live and how to serve them."""
    host: str = "0.0.0.0"
    port: int = Field(default_factory=default_port)
    dist_dir: Path = Path("dist")
    index_file: str = "index.html"
    api_prefix: str = "/api"
