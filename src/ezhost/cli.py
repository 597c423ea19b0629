#!/usr/bin/env python3
"""
Command-line client for the e-z.host API with clipboard integration.
"""

import sys
from typing import List, Optional

import click

from .client import EZHostClient
from .clipboard import Clipboard
from .config import Config, ConfigError, CredentialStore


USAGE = """\
Usage: e-z [OPTIONS]
A simple client to interact with the e-z.host API

Options:
  --help, -h                     Display this help message
  --api-key, -a [API_KEY]        Store an API key (prompt if API_KEY is not provided)
  --upload, -u [FILE_PATH]       Upload a file to the API (prompt if FILE_PATH is not provided)
  --upload-raw, -ur [FILE_PATH]  Same as the above option, but copies the raw URL to the clipboard
  --shorten, -s [URL]            Shorten a given URL using the API"""


class EZHost:
    def __init__(self, config: Optional[Config] = None,
                 client: Optional[EZHostClient] = None):
        self.config = config or Config.from_env()
        self.store = CredentialStore(self.config)
        self.client = client or EZHostClient(Clipboard())

    def display_help(self) -> None:
        print(USAGE)

    def _take_value(self, args: List[str], i: int, prompt: str) -> str:
        """Return the token after ``args[i]``, prompting when there isn't one."""
        if i + 1 < len(args):
            return args[i + 1]
        return click.prompt(prompt)

    def run(self, args: List[str]) -> int:
        """Execute every action in ``args``, in order."""
        if not args:
            self.display_help()
            return 0

        try:
            i = 0
            while i < len(args):
                arg = args[i]

                if arg in ('--help', '-h'):
                    self.display_help()
                    return 0

                elif arg in ('--api-key', '-a'):
                    self.store.save(self._take_value(args, i, "Enter API Key"))
                    i += 1

                elif arg in ('--upload', '-u', '--upload-raw', '-ur'):
                    file_path = self._take_value(args, i, "Enter file path to upload")
                    i += 1
                    api_key = self.store.get_or_prompt()
                    self.client.upload(file_path, api_key, arg in ('--upload-raw', '-ur'))

                elif arg in ('--shorten', '-s'):
                    url = self._take_value(args, i, "Enter URL to shorten")
                    i += 1
                    api_key = self.store.get_or_prompt()
                    self.client.shorten(api_key, url)

                else:
                    print(f"Unknown option: {arg}", file=sys.stderr)

                i += 1

        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        return 0


@click.command(context_settings={
    'ignore_unknown_options': True,
    'allow_extra_args': True,
    'help_option_names': [],
})
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def main(args):
    """A simple client to interact with the e-z.host API."""
    app = EZHost()
    sys.exit(app.run(list(args)))


if __name__ == '__main__':
    main()
