# gp_relay/config.py

from typing import List

from pydantic import BaseModel

UPSTREAM_URL = "https://celestrak.com/NORAD/elements/gp.php?GROUP=starlink&FORMAT=json"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000

CORS_ALLOW_ORIGIN = "*"
CORS_ALLOW_METHODS: List[str] = ["GET", "OPTIONS"]
CORS_MAX_AGE = 86400  # one day, in seconds


class RelaySettings(BaseModel):
    """
    Startup configuration for the relay. Built in code, never read from the environment.
    """

    upstream_url: str = UPSTREAM_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors: bool = True
