import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from subzero.services.font import FONT_SUBZERO, GLYPH_HEIGHT, Glyph, glyph_for

logger = logging.getLogger(__name__)

SPACE = " "
UNDERLINE = "_"
MAX_SQUASH = 3

DEFAULT_SPACES = 5
DEFAULT_BETWEEN = 2
DEFAULT_SQUASH = 0


def can_overwrite(existing: str, candidate: str) -> bool:
    """Whether ``candidate`` may replace ``existing`` when two glyphs overlap."""
    if existing == SPACE:
        return True
    if candidate == SPACE:
        return False
    # slashes and other strokes swallow the bottom line of the previous glyph
    return existing == UNDERLINE


def is_skipped(char: str) -> bool:
    code = ord(char)
    return code < 0x20 or code == 0x7F or code == 0xFF


def split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def squash_row(row: list[str], incoming: str, depth: int) -> None:
    """Merge ``incoming`` onto the tail of ``row`` in place.

    The probe always tests the first column of ``incoming`` against the
    trailing columns of ``row``. Columns of ``incoming`` before ``depth`` are
    either merged into the overlap or dropped; the rest is appended.
    """
    limit = min(depth, len(row))
    popped = 0
    while popped < limit and incoming and can_overwrite(row[-popped - 1], incoming[0]):
        popped += 1

    start = depth - popped
    offset = len(row) - popped
    for i in range(popped):
        if start + i >= len(incoming):
            break
        candidate = incoming[start + i]
        if can_overwrite(row[offset + i], candidate):
            row[offset + i] = candidate

    row.extend(incoming[depth:])


@dataclass
class OutputBuffer:
    rows: list[list[str]] = field(default_factory=lambda: [[] for _ in range(GLYPH_HEIGHT)])
    first: bool = True

    def pad(self, count: int) -> None:
        for row in self.rows:
            row.extend(SPACE * count)
        self.first = True

    def place(self, glyph: Glyph, between: int) -> None:
        for row, incoming in zip(self.rows, glyph):
            if not self.first:
                row.extend(SPACE * between)
            row.extend(incoming)
        self.first = False

    def squash(self, glyph: Glyph, depth: int) -> None:
        for row, incoming in zip(self.rows, glyph):
            squash_row(row, incoming, depth)
        self.first = False

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.rows]


class GlyphCompositor:
    """Lays out block-letter glyphs into five output rows per input line.

    Letters are looked up case-insensitively. Control characters, DEL and
    0xFF are dropped. Every other character is a word gap of ``spaces``
    columns, after which the next letter starts fresh (no ``between`` gap
    and no squashing).
    """

    def __init__(
        self,
        spaces: int = DEFAULT_SPACES,
        between: int = DEFAULT_BETWEEN,
        squash: int = DEFAULT_SQUASH,
        font: Mapping[str, Glyph] = FONT_SUBZERO,
    ):
        if spaces < 0 or between < 0:
            raise ValueError("spacing must not be negative")
        if not 0 <= squash <= MAX_SQUASH:
            raise ValueError(f"squash must be between 0 and {MAX_SQUASH}")
        self.spaces = spaces
        self.between = between
        self.squash = squash
        self.font = font

    def render_line(self, line: str) -> list[str]:
        buffer = OutputBuffer()
        for char in line:
            if is_skipped(char):
                continue
            glyph = glyph_for(char, self.font)
            if glyph is None:
                buffer.pad(self.spaces)
            elif buffer.first or self.squash == 0:
                buffer.place(glyph, self.between)
            else:
                buffer.squash(glyph, self.squash)
        return buffer.lines()

    def iter_lines(self, text: str) -> Iterator[list[str]]:
        for line in split_lines(text):
            rows = self.render_line(line)
            logger.debug("Rendered %r into %d columns", line, lines_width(rows))
            yield rows

    def render(self, text: str) -> list[str]:
        return [row for rows in self.iter_lines(text) for row in rows]


def render_text(
    text: str,
    spaces: int = DEFAULT_SPACES,
    between: int = DEFAULT_BETWEEN,
    squash: int = DEFAULT_SQUASH,
) -> list[str]:
    return GlyphCompositor(spaces=spaces, between=between, squash=squash).render(text)


def lines_width(lines: list[str]) -> int:
    return max((len(line) for line in lines), default=0)


def measure_text_width(
    text: str,
    spaces: int = DEFAULT_SPACES,
    between: int = DEFAULT_BETWEEN,
    squash: int = DEFAULT_SQUASH,
) -> int:
    return lines_width(render_text(text, spaces=spaces, between=between, squash=squash))
