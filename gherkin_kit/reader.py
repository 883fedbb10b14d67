"""Reading Gherkin source files, whole or one line-token at a time."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

from gherkin_kit.gherkin_line import GherkinLine
from gherkin_kit.tokens import Location, Token

PathLike = Union[str, bytes, "os.PathLike[str]"]

_ENCODING = "utf-8"
_ERRORS = "replace"


def read_source(file_name: PathLike) -> str:
    """Return the whole UTF-8 content of a file, or '' if it cannot be opened."""
    try:
        with open(file_name, "rb") as file:
            data = file.read()
    except OSError:
        return ""
    return data.decode(_ENCODING, errors=_ERRORS)


class FileTokenScanner:
    """Hands out one token per line of a file, then end-of-input tokens.

    Lines end at '\\n', '\\r' or '\\r\\n'. A file that cannot be opened
    behaves as an empty one. Once the input is exhausted, every further
    read yields another end-of-input token with the next line number.
    """

    def __init__(self, file_name: PathLike) -> None:
        self._line_number = 0
        self._file: Optional[IO[str]]
        try:
            self._file = open(
                file_name, "r", encoding=_ENCODING, errors=_ERRORS, newline=""
            )
        except OSError:
            self._file = None

    def read(self) -> Token:
        """Read the next line and wrap it in a token."""
        self._line_number += 1
        location = Location(self._line_number, 0)
        if self._file is None:
            return Token(None, location)
        raw = self._file.readline()
        if not raw:
            return Token(None, location)
        if raw.endswith("\r\n"):
            text = raw[:-2]
        elif raw.endswith(("\r", "\n")):
            text = raw[:-1]
        else:
            text = raw
        return Token(GherkinLine(text, self._line_number), location)

    def close(self) -> None:
        """Release the file; later reads yield end-of-input tokens."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileTokenScanner":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first end-of-input token."""
        while True:
            token = self.read()
            yield token
            if token.is_eof():
                return