import pytest
from fastapi.testclient import TestClient

from samples import NEW, OLD
from ui.app import app


@pytest.fixture
def api() -> TestClient:
    return TestClient(app)


def test_health(api: TestClient) -> None:
    resp = api.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.parametrize("route", ["/wordle", "/strands", "/connections", "/spellingbee"])
def test_date_is_required(api: TestClient, fake_upstream, route: str) -> None:
    for kwargs in ({}, {"json": {}}, {"json": {"date": ""}}):
        resp = api.post(route, **kwargs)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Date is required"}
    assert fake_upstream.calls == []


def test_invalid_body(api: TestClient, fake_upstream) -> None:
    resp = api.post("/wordle", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_wordle(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{NEW}/wordle/v2/2024-01-01.json", {"solution": "CRANE"})
    resp = api.post("/wordle", json={"date": "2024-01-01"})
    assert resp.status_code == 200
    assert resp.json() == {"answer": {"solution": "CRANE"}}


def test_wordle_upstream_failure(api: TestClient, fake_upstream) -> None:
    resp = api.post("/wordle", json={"date": "1999-01-01"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch Wordle data"}


def test_strands(api: TestClient, all_puzzles) -> None:
    resp = api.post("/strands", json={"date": "2024-01-01"})
    assert resp.status_code == 200
    assert resp.json() == {"answer": ["APPLE", "PEAR", "PLUM"], "spangram": "FRUITBOWL"}


def test_strands_bad_shape_is_500(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{NEW}/strands/v2/2024-01-01.json", {"themeWords": ["A"]})
    resp = api.post("/strands", json={"date": "2024-01-01"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch Strands data"}


def test_connections(api: TestClient, all_puzzles) -> None:
    resp = api.post("/connections", json={"date": "2024-01-01"})
    assert resp.status_code == 200
    assert resp.json() == {"answer": [{"ANIMALS": ["CAT", "DOG"]}, {"COLORS": ["RED", "BLUE"]}]}


def test_spelling_bee_uses_date(api: TestClient, all_puzzles) -> None:
    resp = api.post("/spellingbee", json={"date": "2024-01-01"})
    assert resp.status_code == 200
    assert resp.json()["answer"]["centerLetter"] == "a"
    assert all_puzzles.urls == [f"{OLD}/spelling-bee/2024-01-01"]


def test_spelling_bee_without_game_data(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/spelling-bee/2024-01-01", "<html>nothing</html>")
    resp = api.post("/spellingbee", json={"date": "2024-01-01"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Could not find gameData in the HTML content."}


def test_spelling_bee_without_today(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/spelling-bee/2024-01-01", 'window.gameData = {"yesterday": {}}')
    resp = api.post("/spellingbee", json={"date": "2024-01-01"})
    assert resp.status_code == 404
    assert "'today'" in resp.json()["error"]


def test_spelling_bee_parse_failure(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/spelling-bee/2024-01-01", "window.gameData = {today: load()}")
    resp = api.post("/spellingbee", json={"date": "2024-01-01"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to parse gameData JSON."}


def test_spelling_bee_upstream_failure(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/spelling-bee/2024-01-01", "bad gateway", status=502)
    resp = api.post("/spellingbee", json={"date": "2024-01-01"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "An internal error occurred while processing the HTML."}


def test_letter_boxed(api: TestClient, all_puzzles) -> None:
    resp = api.get("/letterboxd")
    assert resp.status_code == 200
    assert resp.json() == {"answer": {"id": 1234, "solution": ["WORD", "DRAWN"], "date": "2024-01-01"}}


def test_letter_boxed_missing_end(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/letter-boxed/", "window.gameData = {id: 1, ourSolution: [")
    resp = api.get("/letterboxd")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Could not find the end of the gameData object."}


def test_sudoku_partial(api: TestClient, all_puzzles) -> None:
    resp = api.get("/sudoku")
    assert resp.status_code == 200
    assert resp.json() == {"answer": {"easy": [[1, 2], [3, 4]], "hard": [[5, 6], [7, 8]]}}


def test_cors_header(api: TestClient) -> None:
    resp = api.get("/health", headers={"Origin": "https://example.org"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_unknown_route(api: TestClient) -> None:
    resp = api.get("/crossword")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_sudoku_non_finite_numbers_become_null(api: TestClient, fake_upstream) -> None:
    fake_upstream.add(f"{OLD}/sudoku/", "window.gameData = {easy: {puzzle_data: {solution: [[1, NaN], [Infinity, 4]]}}}")
    resp = api.get("/sudoku")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"answer": {"easy": [[1, None], [None, 4]]}}
