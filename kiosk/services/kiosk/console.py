"""Line-based console I/O."""
import sys
from typing import Optional, TextIO

from kiosk.services.kiosk.constants import YES_ANSWER, YES_NO_SUFFIX


class KioskError(Exception):
    """Base error for the kiosk."""


class InputClosedError(KioskError):
    """Raised when the input stream has no more lines."""


class Console:
    """Reads trimmed lines and writes text lines.

    Streams default to the process's stdin and stdout at call time.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def read_line(self) -> str:
        """
        Read one line with surrounding whitespace removed.

        Raises:
            InputClosedError: If the stream is at end of file
        """
        line = self.stdin.readline()
        if not line:
            raise InputClosedError("Input stream closed while waiting for a line")
        return line.strip()

    def write(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def yes_no(self, question: str) -> bool:
        """Ask a yes/no question; only a literal 'y' means yes."""
        self.write(f"{question} {YES_NO_SUFFIX}")
        return self.read_line() == YES_ANSWER
