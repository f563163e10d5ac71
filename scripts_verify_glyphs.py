"""Quick regression check that every letter of the Sub-Zero font renders."""

from subzero.services.font import FONT_SUBZERO, GLYPH_HEIGHT, LETTERS
from subzero.services.rendering import render_text


def inked(text: str, squash: int = 0) -> int:
    return sum(1 for line in render_text(text, squash=squash) for ch in line if ch != " ")


def main() -> None:
    for ch in LETTERS:
        lines = render_text(ch)
        assert len(lines) == GLYPH_HEIGHT, f"wrong height for {ch}"
        assert lines == list(FONT_SUBZERO[ch]), f"glyph for {ch} not rendered verbatim"
        assert render_text(ch.lower()) == lines, f"lowercase {ch} differs"

    # Squashing may hide underlines but must never drop whole letters.
    for squash in range(4):
        assert inked("SUBZERO", squash) > 80, f"squash={squash} lost ink"

    print("glyph-regression-ok")


if __name__ == "__main__":
    main()
