from collections.abc import Mapping
from types import MappingProxyType

FONT_INFO = r"""
-> Conversion to FigLet font by MEPH. (Part of ASCII Editor Service Pack I)
(http://studenten.freepage.de/meph/ascii/ascii/editor/_index.htm)
-> Defined: ASCII code alphabet
-> Uppercase characters only.
ScarecrowsASCIIArtArchive1.0.txt
From: "Sub-Zero" <bodom@papaya.ucs.indiana.edu>
"Here's a font I've been working on lately. Can someone make the V, Q, and X
look better? Also, the B, P, and R could use an improvement too.
Oh, here it is." 
 ______ __  __ ______ ______ ______  
/\__  _\\ \_\ \\  == \\  ___\\___  \ 
\/_/\ \/ \____ \\  _-/ \  __\/_/  /__
   \ \_\\/\_____\\_\  \ \_____\\_____\
    \/_/ \/_____//_/   \/_____//_____/
---------------------------------"""

GLYPH_HEIGHT = 5
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Glyph = tuple[str, ...]

# Rows are kept exactly as drawn; widths differ between letters.
_FONT_ROWS: dict[str, Glyph] = {
    "A": (
        " ______  ",
        "/\\  __ \\ ",
        "\\ \\  __ \\",
        "\\ \\_\\ \\_\\",
        " \\/_/\\/_/",
    ),
    "B": (
        " ______  ",
        "/\\  == \\ ",
        "\\ \\  __< ",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "C": (
        " ______  ",
        "/\\  ___\\ ",
        "\\ \\ \\____",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "D": (
        " _____   ",
        "/\\  __-. ",
        "\\ \\ \\/\\ \\",
        "\\ \\____- ",
        " \\/____/ ",
    ),
    "E": (
        " ______  ",
        "/\\  ___\\ ",
        "\\ \\  __\\ ",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "F": (
        " ______  ",
        "/\\  ___\\ ",
        "\\ \\  __\\ ",
        "\\ \\_\\    ",
        " \\/_/    ",
    ),
    "G": (
        " ______  ",
        "/\\  ___\\ ",
        "\\ \\ \\__ \\",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "H": (
        " __  __  ",
        "/\\ \\_\\ \\ ",
        "\\ \\  __ \\",
        "\\ \\_\\ \\_\\",
        " \\/_/\\/_/",
    ),
    "I": (
        " __  ",
        "/\\ \\ ",
        "\\ \\ \\",
        "\\ \\_\\",
        " \\/_/",
    ),
    "J": (
        "    __  ",
        "   /\\ \\ ",
        "  _\\_\\ \\",
        "/\\_____\\",
        "\\/_____/",
    ),
    "K": (
        " __  __  ",
        "/\\ \\/ /  ",
        "\\ \\  _\"-.",
        "\\ \\_\\ \\_\\",
        " \\/_/\\/_/",
    ),
    "L": (
        " __      ",
        "/\\ \\     ",
        "\\ \\ \\____",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "M": (
        " __    __  ",
        "/\\ \"-./  \\ ",
        "\\ \\ \\-./\\ \\",
        "\\ \\_\\ \\ \\_\\",
        " \\/_/  \\/_/",
    ),
    "N": (
        " __   __  ",
        "/\\ \"-.\\ \\ ",
        "\\ \\ \\-.  \\",
        "\\ \\_\\\\\"\\_\\",
        " \\/_/ \\/_/",
    ),
    "O": (
        " ______  ",
        "/\\  __ \\ ",
        "\\ \\ \\/\\ \\",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "P": (
        " ______  ",
        "/\\  == \\ ",
        "\\ \\  _-/ ",
        "\\ \\_\\    ",
        " \\/_/    ",
    ),
    "Q": (
        " ______  ",
        "/\\  __ \\ ",
        "\\ \\ \\/\\_\\",
        "\\ \\___\\_\\",
        " \\/___/_/",
    ),
    "R": (
        " ______  ",
        "/\\  == \\ ",
        "\\ \\  __< ",
        "\\ \\_\\ \\_\\",
        " \\/_/ /_/",
    ),
    "S": (
        " ______  ",
        "/\\  ___\\ ",
        "\\ \\___  \\",
        "\\/\\_____\\",
        " \\/_____/",
    ),
    "T": (
        " ______  ",
        "/\\__  _\\ ",
        "\\/_/\\ \\/ ",
        "  \\ \\_\\  ",
        "   \\/_/  ",
    ),
    "U": (
        " __  __  ",
        "/\\ \\/\\ \\ ",
        "\\ \\ \\_\\ \\",
        "\\ \\_____\\",
        " \\/_____/",
    ),
    "V": (
        " __   __ ",
        "/\\ \\ / / ",
        "\\ \\ \\'/  ",
        "\\ \\__|   ",
        " \\/_/    ",
    ),
    "W": (
        " __     __  ",
        "/\\ \\  _ \\ \\ ",
        "\\ \\ \\/ \".\\ \\",
        "\\ \\__/\".~\\_\\",
        " \\/_/   \\/_/",
    ),
    "X": (
        " __  __  ",
        "/\\_\\_\\_\\ ",
        "\\/_/\\_\\/_",
        " /\\_\\/\\_\\",
        " \\/_/\\/_/",
    ),
    "Y": (
        " __  __  ",
        "/\\ \\_\\ \\ ",
        "\\ \\____ \\",
        "\\/\\_____\\",
        " \\/_____/",
    ),
    "Z": (
        " ______  ",
        "/\\___  \\ ",
        "\\/_/  /__",
        " /\\_____\\",
        " \\/_____/",
    ),
}

FONT_SUBZERO = MappingProxyType(_FONT_ROWS)


def is_letter(char: str) -> bool:
    return len(char) == 1 and ("A" <= char <= "Z" or "a" <= char <= "z")


def glyph_for(char: str, font: Mapping[str, Glyph] = FONT_SUBZERO) -> Glyph | None:
    if not is_letter(char):
        return None
    return font[char.upper()]


def glyph_width(glyph: Glyph) -> int:
    return max((len(row) for row in glyph), default=0)
