"""Where the text to render comes from: command-line words, a file or stdin."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


class InputSourceError(Exception):
    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StdinReadError(InputSourceError):
    exit_code = 5


class FileReadError(InputSourceError):
    exit_code = 6


def join_words(words: list[str]) -> str:
    return " ".join(words)


def read_source(path: str, stdin: TextIO | None = None) -> str:
    if path == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StdinReadError(f"could not read from stdin: {exc}") from exc

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"could not read from file '{path}': {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return text
