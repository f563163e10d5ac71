from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from subzero.schemas import FontResponse, RenderRequest, RenderResponse
from subzero.services.font import FONT_INFO, FONT_SUBZERO, GLYPH_HEIGHT, LETTERS, glyph_width
from subzero.services.rendering import GlyphCompositor, lines_width

router = APIRouter(prefix="/api", tags=["render"])


def _compositor(payload: RenderRequest) -> GlyphCompositor:
    return GlyphCompositor(spaces=payload.spaces, between=payload.between, squash=payload.squash)


@router.post("/render", response_model=RenderResponse)
async def render(payload: RenderRequest):
    lines = _compositor(payload).render(payload.text)
    return RenderResponse(
        lines=lines,
        width=lines_width(lines),
        height=len(lines),
    )


@router.post("/render/text", response_class=PlainTextResponse)
async def render_plain(payload: RenderRequest):
    lines = _compositor(payload).render(payload.text)
    return "".join(f"{line}\n" for line in lines)


@router.get("/font", response_model=FontResponse)
async def font():
    return FontResponse(
        info=FONT_INFO.strip("\n"),
        height=GLYPH_HEIGHT,
        letters=LETTERS,
        widths={letter: glyph_width(FONT_SUBZERO[letter]) for letter in LETTERS},
    )
