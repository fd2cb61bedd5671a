"""A character reader with a look-ahead buffer and line/column tracking."""

from __future__ import annotations

from typing import Optional, TextIO


class FileReader:
    """Reads characters from a text stream on demand into a buffer.

    Characters are only taken from the stream when ``has`` asks for them,
    and leave the buffer when ``commit`` moves past them.
    """

    def __init__(self, stream: Optional[TextIO] = None, filename: str = "") -> None:
        self._stream = stream
        self._buffer = ""
        self._eof = False
        self._bad = False
        self.filename = filename
        self.line = 0
        self.column = 0

    def good(self) -> bool:
        """True while the stream can still be read."""
        return self._stream is not None and not self._eof and not self._bad

    def eof(self) -> bool:
        """True once the end of the stream has been reached."""
        return self._eof

    def has(self, length: int) -> bool:
        """Ensure at least ``length`` characters are buffered, reading if needed."""
        if length <= len(self._buffer):
            return True
        if not self.good():
            return False
        while length > len(self._buffer):
            try:
                c = self._stream.read(1)
            except (OSError, ValueError):
                self._bad = True
                return False
            if c == "":
                self._eof = True
                return False
            self._buffer += c
        return True

    def peek(self, index: int) -> str:
        """Return the buffered character at ``index``."""
        if index >= len(self._buffer):
            raise IndexError("filereader: peek outside of buffer")
        return self._buffer[index]

    def view(self, length: int) -> str:
        """Return the first ``length`` buffered characters."""
        if length > len(self._buffer):
            raise IndexError("filereader: view outside of buffer")
        return self._buffer[:length]

    def commit(self, length: int) -> None:
        """Move past the first ``length`` buffered characters for good."""
        if length > len(self._buffer):
            raise IndexError("filereader: commit beyond buffer")
        consumed = self._buffer[:length]
        newlines = consumed.count("\n")
        if newlines:
            self.line += newlines
            self.column = length - consumed.rfind("\n") - 1
        else:
            self.column += length
        self._buffer = self._buffer[length:]

    def __str__(self) -> str:
        if self._stream is None:
            return "filereader( nofile )"
        parts = [f"filereader( {self.filename}, {self.line}, {self.column} ) : "]
        for c in self._buffer:
            if " " <= c <= "~":
                parts.append(c)
            else:
                parts.extend(f"{{{byte:02X}}}" for byte in c.encode("utf-8"))
        if self.eof():
            parts.append(" (end of file)")
        elif not self.good():
            parts.append("(file is not good)")
        parts.append("\n")
        return "".join(parts)