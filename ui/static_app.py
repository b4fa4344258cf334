"""
Static puzzle answers server. Serves the files written by `python -m publish.generate`
without contacting upstream: GET /static/<puzzle>.json, and GET or POST /<puzzle>
returning the same file content (with Cache-Control: no-cache unless STATIC_NO_CACHE=false).
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import config
from publish import FileSink
from puzzles_factory import registered_types

logger = logging.getLogger(__name__)


def _file_route(sink: FileSink, puzzle_type: str, no_cache: bool):
    headers = {"Cache-Control": "no-cache"} if no_cache else None

    def serve_file():
        content = sink.read(puzzle_type)
        if content is None:
            logger.warning("static file missing puzzle=%s path=%s", puzzle_type, sink.path_for(puzzle_type))
            return JSONResponse(
                status_code=404,
                content={"error": f"No generated data for {puzzle_type}. Run the generator first."},
            )
        return Response(content=content, media_type="application/json", headers=headers)

    serve_file.__name__ = f"serve_{puzzle_type}"
    return serve_file


def create_app(static_dir: str | Path | None = None, no_cache: bool | None = None) -> FastAPI:
    """
    Build the static app.

    Args:
        static_dir: Directory holding <puzzle>.json files (default STATIC_DIR).
        no_cache: Add Cache-Control: no-cache to convenience routes (default STATIC_NO_CACHE).
    """
    static_dir = Path(static_dir) if static_dir is not None else config.get_static_dir()
    if no_cache is None:
        no_cache = config.no_cache_enabled()
    sink = FileSink(static_dir)

    app = FastAPI(title="Daily Puzzle Answers (static)")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    for puzzle_type in registered_types():
        app.add_api_route(
            f"/{puzzle_type}",
            _file_route(sink, puzzle_type, no_cache),
            methods=["GET", "POST"],
        )

    # Created up front so /static serves files a later batch run writes
    try:
        static_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("could not create static directory %s: %s", static_dir, e)
    app.mount("/static", StaticFiles(directory=str(static_dir), check_dir=False), name="static")

    return app


app = create_app()


def main() -> None:
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    uvicorn.run(app, host=config.get_host(), port=config.get_port())


if __name__ == "__main__":
    main()
