"""
Greeter backend

Logger and message builders behind the /hello endpoint.
"""

from .greeting import build_greeting, build_timestamped_greeting
from .logger import greeter_logger

__all__ = ["build_greeting", "build_timestamped_greeting", "greeter_logger"]
