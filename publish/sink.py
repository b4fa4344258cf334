"""
Publish sinks for normalized puzzle answers: a JSON file per puzzle type
(batch mode) or an HTTP response body (on-demand mode).
"""

import json
import logging
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from fastapi.responses import JSONResponse

from core.errors import PublishError

logger = logging.getLogger(__name__)


def json_safe(value: Any) -> Any:
    """Replace NaN and +/-Infinity with None at any depth; they have no JSON form."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


def dump_answer(answer: dict) -> str:
    """Serialize an answer the way published files store it (2-space indent, UTF-8 text)."""
    return json.dumps(json_safe(answer), indent=2, ensure_ascii=False, allow_nan=False)


class BaseSink(ABC):
    """Destination for one published answer per puzzle type."""

    @abstractmethod
    def publish(self, puzzle_type: str, answer: dict) -> Any:
        ...


class FileSink(BaseSink):
    """Writes <puzzle_type>.json into output_dir, replacing any previous file."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

    def path_for(self, puzzle_type: str) -> Path:
        return self.output_dir / f"{puzzle_type}.json"

    def publish(self, puzzle_type: str, answer: dict) -> Path:
        path = self.path_for(puzzle_type)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(dump_answer(answer), encoding="utf-8")
        except OSError as e:
            raise PublishError(f"Failed to write {path}: {e}", puzzle_type=puzzle_type) from e
        logger.info("published puzzle=%s path=%s", puzzle_type, path)
        return path

    def read(self, puzzle_type: str) -> str | None:
        """Return the stored JSON text, or None if it has not been generated."""
        path = self.path_for(puzzle_type)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PublishError(f"Failed to read {path}: {e}", puzzle_type=puzzle_type) from e


class ResponseSink(BaseSink):
    """Returns the answer as a 200 JSON response."""

    def __init__(self, headers: dict[str, str] | None = None):
        self.headers = dict(headers or {})

    def publish(self, puzzle_type: str, answer: dict) -> JSONResponse:
        return JSONResponse(content=json_safe(answer), status_code=200, headers=self.headers or None)
