# tests/conftest.py
import pytest
from unittest.mock import Mock, patch

from ezhost.client import EZHostClient
from ezhost.clipboard import Clipboard
from ezhost.config import Config


def make_response(status_code=200, payload=None, text=None):
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else ""
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def config(tmp_path):
    """Config rooted in a temporary directory."""
    return Config(tmp_path / ".config")


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory."""
    monkeypatch.setenv('HOME', str(tmp_path))
    return tmp_path


@pytest.fixture
def mock_post():
    """Patch requests.post as used by the API client."""
    with patch('ezhost.client.requests.post') as mock:
        mock.return_value = make_response(payload={"success": True})
        yield mock


@pytest.fixture
def mock_clipboard():
    clipboard = Mock(spec=Clipboard)
    clipboard.copy.return_value = True
    return clipboard


@pytest.fixture
def client(mock_clipboard):
    return EZHostClient(mock_clipboard)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake image data")
    return path


@pytest.fixture
def mock_pyperclip():
    """Patch pyperclip with an in-memory clipboard."""
    clipboard = {"text": ""}

    def fake_copy(text):
        clipboard["text"] = text

    with patch('pyperclip.copy', side_effect=fake_copy) as mock_copy, \
            patch('pyperclip.paste', side_effect=lambda: clipboard["text"]) as mock_paste:
        yield Mock(copy=mock_copy, paste=mock_paste)
