from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from subzero.api import render
from subzero.config import get_settings
from subzero.services.rendering import render_text

settings = get_settings()

app = FastAPI(title=settings.app_name)
app.include_router(render.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "".join(f"{line}\n" for line in render_text(settings.app_name))


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
