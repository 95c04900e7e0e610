import re

from .errors import InvalidLineTerminator

# Alternation order matters: CRLF must win over a bare CR.
_TERMINATOR = re.compile(r"\r\n|\n|\r")


class LineAssembler:
    """Split decoded text chunks into complete lines.

    Text may be fed in arbitrary pieces; a line is only emitted once its
    terminator (CRLF or LF) has been seen. Empty lines are dropped.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._lines: list[str] = []

    def feed(self, text: str) -> None:
        buffer = self._buffer + text
        start = 0

        for match in _TERMINATOR.finditer(buffer):
            if match.group() == "\r":
                if match.end() == len(buffer):
                    # The LF may still arrive with the next chunk.
                    break

                raise InvalidLineTerminator(match.start())

            if match.start() > start:
                self._lines.append(buffer[start : match.start()])

            start = match.end()

        self._buffer = buffer[start:]

    def take_lines(self) -> list[str]:
        lines, self._lines = self._lines, []
        return lines

    def finalize(self) -> None:
        """Flush the unterminated last line, if any."""
        if self._buffer.endswith("\r"):
            raise InvalidLineTerminator(len(self._buffer) - 1)

        if self._buffer:
            self._lines.append(self._buffer)
            self._buffer = ""
