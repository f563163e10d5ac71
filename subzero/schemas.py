from pydantic import BaseModel, Field

from subzero.config import get_settings

settings = get_settings()


class RenderRequest(BaseModel):
    text: str = Field(min_length=1, max_length=settings.max_text_length)
    spaces: int = Field(default=settings.default_spaces, ge=0, le=64)
    between: int = Field(default=settings.default_between, ge=0, le=64)
    squash: int = Field(default=settings.default_squash, ge=0, le=3)


class RenderResponse(BaseModel):
    lines: list[str]
    width: int
    height: int


class FontResponse(BaseModel):
    info: str
    height: int
    letters: str
    widths: dict[str, int]
