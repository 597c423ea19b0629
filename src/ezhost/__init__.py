"""e-z.host upload and URL shortener client with clipboard integration."""

__version__ = "0.1.0"

from .cli import EZHost
from .client import ApiResponse, EZHostClient

__all__ = ["EZHost", "EZHostClient", "ApiResponse"]
