"""
Greeting message builders for the /hello endpoint.
"""

from datetime import datetime
from typing import Optional

GREETING = "Hello, World!"
TIMESTAMP_PREFIX = "Hello, World! Current date and time is: "
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_greeting() -> str:
    return GREETING


def build_timestamped_greeting(now: Optional[datetime] = None) -> str:
    """
    Build the greeting annotated with a wall-clock timestamp.

    Args:
        now: Moment to stamp the greeting with, defaults to the local current time

    Returns:
        The greeting followed by the timestamp as YYYY-MM-DD HH:MM:SS
    """
    if now is None:
        now = datetime.now()
    return f"{TIMESTAMP_PREFIX}{now.strftime(TIMESTAMP_FORMAT)}"
