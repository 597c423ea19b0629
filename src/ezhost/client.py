"""
Client for the e-z.host file upload and URL shortener endpoints.
"""

import sys
from pathlib import Path
from typing import Optional

import requests
from pydantic import BaseModel, ValidationError, field_validator

from .clipboard import Clipboard


API_BASE_URL = "https://api.e-z.host"

MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB

ALLOWED_EXTENSIONS = frozenset({
    "jpg", "jpeg", "png", "gif", "mp3", "wav", "mp4", "avi", "pdf", "zip", "json",
})


class ApiResponse(BaseModel):
    """Reply shared by ``/files`` and ``/shortener``.

    Field names follow the wire format, including the server's ``shortendUrl``.
    """

    success: bool = False
    message: str = ""
    imageUrl: str = ""
    rawUrl: str = ""
    shortendUrl: str = ""
    deletionUrl: str = ""

    @field_validator("success", mode="before")
    @classmethod
    def _null_to_false(cls, value):
        return False if value is None else value

    @field_validator("message", "imageUrl", "rawUrl", "shortendUrl", "deletionUrl", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value


class EZHostClient:
    def __init__(self, clipboard: Clipboard, base_url: str = API_BASE_URL):
        self.clipboard = clipboard
        self.base_url = base_url.rstrip("/")

    def validate_file(self, path: Path) -> Optional[str]:
        """Return why ``path`` can't be uploaded, or None if it can."""
        try:
            size = path.stat().st_size
        except (FileNotFoundError, NotADirectoryError):
            return "File does not exist."
        except OSError as e:
            return f"Cannot access file: {e}"

        if size > MAX_FILE_SIZE:
            return "File size exceeds 100MB."

        extension = path.suffix.lower().lstrip(".")
        if extension not in ALLOWED_EXTENSIONS:
            return f"Invalid file type '{path.suffix}'."

        return None

    def _post(self, endpoint: str, api_key: str, **kwargs) -> Optional[ApiResponse]:
        """POST to ``endpoint`` and decode the reply.

        Every failure is reported on stderr and turned into None.
        """
        url = f"{self.base_url}/{endpoint}"
        headers = {"key": api_key}

        try:
            response = requests.post(url, headers=headers, **kwargs)
        except requests.RequestException as e:
            print(f"Error performing request: {e}", file=sys.stderr)
            return None

        if response.status_code != 200:
            print(f"Error: Received non-OK response: {response.status_code}", file=sys.stderr)
            print(f"Response: {response.text}", file=sys.stderr)
            return None

        try:
            return ApiResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            print("Failed to parse JSON response.", file=sys.stderr)
            return None

    def upload(self, file_path: str, api_key: str, want_raw_url: bool = False) -> bool:
        """Upload a file and copy its display (or raw) URL to the clipboard."""
        path = Path(file_path)

        error = self.validate_file(path)
        if error:
            print(f"Error: {error}", file=sys.stderr)
            return False

        try:
            with path.open('rb') as f:
                result = self._post("files", api_key, files={"file": (path.name, f)})
        except OSError as e:
            print(f"Error opening file: {e}", file=sys.stderr)
            return False

        if result is None:
            return False

        if not result.success:
            print(f"Upload failed: {result.message}", file=sys.stderr)
            return False

        url = result.rawUrl if want_raw_url else result.imageUrl
        print(f"File uploaded: {url}")
        if result.deletionUrl:
            print(f"Deletion URL: {result.deletionUrl}")

        if self.clipboard.copy(url):
            print("(URL copied to clipboard)")
        return True

    def shorten(self, api_key: str, url: str) -> bool:
        """Shorten ``url`` and copy the short link to the clipboard."""
        if not url:
            print("Error: No URL given.", file=sys.stderr)
            return False

        result = self._post("shortener", api_key, json={"url": url})
        if result is None:
            return False

        if not result.success:
            print(f"URL shortening failed: {result.message}", file=sys.stderr)
            return False

        print(f"Shortened URL: {result.shortendUrl}")
        if self.clipboard.copy(result.shortendUrl):
            print("(URL copied to clipboard)")
        return True
