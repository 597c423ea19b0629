"""
Clipboard output for uploaded and shortened URLs.
"""

import sys

try:
    import pyperclip
    HAS_CLIPBOARD = True
except ImportError:
    HAS_CLIPBOARD = False


class Clipboard:
    def _report_failure(self, text: str, reason) -> bool:
        print(f"Error copying to clipboard: {reason}", file=sys.stderr)
        print(f"Please copy manually: {text}")
        return False

    def copy(self, text: str) -> bool:
        """Copy ``text`` to the system clipboard.

        pyperclip hands the text to the platform utility (xclip, xsel,
        wl-copy, pbcopy...) on stdin, so nothing is passed through a shell.
        Those utilities can exit non-zero without pyperclip noticing, so the
        clipboard is read back to confirm the write.
        A failure here is reported but never raised.
        """
        if not HAS_CLIPBOARD:
            return self._report_failure(text, "pyperclip not installed")

        try:
            pyperclip.copy(text)
            copied = pyperclip.paste()
        except (pyperclip.PyperclipException, OSError) as e:
            return self._report_failure(text, e)

        if copied != text:
            return self._report_failure(text, "clipboard utility did not store the text")
        return True
