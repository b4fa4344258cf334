"""
On-demand puzzle answers API. Each request fetches the puzzle from upstream,
extracts and normalizes it, and returns the answer; nothing is stored.
POST /wordle, /strands, /connections, /spellingbee take {"date": "YYYY-MM-DD"};
GET /letterboxd and /sudoku return today's puzzle.
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import config
from core.errors import MissingDateError, NotFoundError, ParseError, ShapeError
from publish import ResponseSink
from puzzles_factory import build_answer, get_adapter

logger = logging.getLogger(__name__)

for _log in ("upstream", "puzzles_factory", "extraction", "ui.app"):
    logging.getLogger(_log).setLevel(logging.INFO)

PUZZLE_LABELS = {
    "wordle": "Wordle",
    "strands": "Strands",
    "connections": "Connections",
    "spellingbee": "Spelling Bee",
    "letterboxd": "Letter Boxed",
    "sudoku": "Sudoku",
}

_sink = ResponseSink()

app = FastAPI(title="Daily Puzzle Answers")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    """Render errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


class DateBody(BaseModel):
    date: str | None = None


def _require_date(body: DateBody | None) -> str:
    date = ((body.date if body else None) or "").strip()
    if not date:
        raise HTTPException(status_code=400, detail="Date is required")
    return date


def _answer_response(puzzle_type: str, date: str | None = None):
    """
    Build the answer for one puzzle and return it as the response.
    HTML puzzles report missing or incomplete gameData as 404; everything else
    that goes wrong is a 500 with a generic message.
    """
    label = PUZZLE_LABELS[puzzle_type]
    is_html = get_adapter(puzzle_type).content_kind == "html"
    try:
        answer = build_answer(puzzle_type, date)
        return _sink.publish(puzzle_type, answer)
    except MissingDateError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except (NotFoundError, ShapeError) as e:
        if is_html:
            logger.warning("%s structure failure: %s", puzzle_type, e)
            raise HTTPException(status_code=404, detail=str(e)) from e
        logger.error("Failed to normalize %s data: %s", puzzle_type, e)
        raise HTTPException(status_code=500, detail=f"Failed to fetch {label} data") from e
    except ParseError as e:
        logger.error("Failed to parse %s data: %s", puzzle_type, e)
        detail = "Failed to parse gameData JSON." if is_html else f"Failed to fetch {label} data"
        raise HTTPException(status_code=500, detail=detail) from e
    except Exception as e:
        logger.error("Failed to fetch %s data: %s", puzzle_type, e)
        detail = (
            "An internal error occurred while processing the HTML."
            if is_html
            else f"Failed to fetch {label} data"
        )
        raise HTTPException(status_code=500, detail=detail) from e


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/wordle")
def wordle(body: DateBody | None = None):
    """Wordle answer for body.date; the upstream JSON is returned as-is under "answer"."""
    return _answer_response("wordle", _require_date(body))


@app.post("/strands")
def strands(body: DateBody | None = None):
    """Strands theme words ("answer") and "spangram" for body.date."""
    return _answer_response("strands", _require_date(body))


@app.post("/connections")
def connections(body: DateBody | None = None):
    """Connections groups for body.date as [{title: [words]}, ...]."""
    return _answer_response("connections", _require_date(body))


@app.post("/spellingbee")
def spelling_bee(body: DateBody | None = None):
    """Spelling Bee "today" block from the page for body.date."""
    return _answer_response("spellingbee", _require_date(body))


@app.get("/letterboxd")
def letter_boxed():
    """Today's Letter Boxed id, solution and date."""
    return _answer_response("letterboxd")


@app.get("/sudoku")
def sudoku():
    """Today's Sudoku solutions by difficulty (levels without a solution are omitted)."""
    return _answer_response("sudoku")


def main() -> None:
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    uvicorn.run(app, host=config.get_host(), port=config.get_port())


if __name__ == "__main__":
    main()
