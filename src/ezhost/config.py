"""
Configuration paths and the on-disk API key store.
"""

import os
import sys
import tempfile
from pathlib import Path

import click


KEY_FILENAME = ".e-z_key"


class ConfigError(Exception):
    """Raised when the configuration directory or key file cannot be written."""


class Config:
    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir)
        self.key_path = self.config_dir / KEY_FILENAME

    @classmethod
    def from_env(cls) -> "Config":
        """Build the config rooted at ``$HOME/.config``."""
        return cls(Path.home() / ".config")


class CredentialStore:
    def __init__(self, config: Config):
        self.config = config

    def save(self, key: str) -> None:
        """Replace the stored API key with ``key``."""
        try:
            self.config.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Error creating config directory: {e}")

        # mkstemp creates the file with 0600, and os.replace swaps it in atomically
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.config.config_dir, prefix=KEY_FILENAME + "."
            )
            try:
                with os.fdopen(fd, 'wb') as f:
                    f.write(key.encode('utf-8'))
                os.replace(tmp_name, self.config.key_path)
            except OSError:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise ConfigError(f"Error writing API key to file: {e}")

        print("API key saved successfully!")

    def read(self) -> str:
        """Return the stored key, or an empty string if there is none."""
        try:
            return self.config.key_path.read_bytes().decode('utf-8')
        except FileNotFoundError:
            print("No API key found. File does not exist.", file=sys.stderr)
        except (OSError, UnicodeDecodeError) as e:
            print(f"No API key found. Key file could not be read: {e}", file=sys.stderr)
        return ""

    def get_or_prompt(self) -> str:
        api_key = self.read()
        if not api_key:
            api_key = click.prompt("Enter API Key")
        return api_key
