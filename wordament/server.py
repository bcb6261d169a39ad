import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordament.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordament")

# Populated at startup
_trie = None


class SolveRequest(BaseModel):
    grid: list[list[str]]
    scores: list[list[int]] | None = None
    auto_score: bool = False
    min_word_length: int | None = None


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        from wordament.dictionary import load_trie
        from wordament.trie import Trie

        dict_path = settings.DICTIONARY_PATH
        logger.info("Loading dictionary from %s (min_length=%d)", dict_path, settings.MIN_WORD_LENGTH)
        try:
            _trie = load_trie(str(dict_path), settings.MIN_WORD_LENGTH)
        except FileNotFoundError:
            logger.warning("Dictionary %s not found, starting with an empty trie", dict_path)
            _trie = Trie()

        yield

    application = FastAPI(title="Wordament Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "word_count": len(_trie) if _trie is not None else 0,
        }

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordament.metrics import StageTimer
        from wordament.solver import Solver, default_scores

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        grid = body.grid
        rows = len(grid)
        cols = len(grid[0]) if grid else 0
        logger.info("POST /solve grid=%dx%d", rows, cols)

        timer = StageTimer()

        scores = body.scores
        if scores is None and body.auto_score:
            scores = default_scores(grid, settings.NORMAL_CELL_VALUE, settings.SPECIAL_CELL_VALUE)

        try:
            found = Solver(_trie).solve(grid, scores, timer)
        except ValueError as e:
            logger.warning("Rejected grid: %s", e)
            raise HTTPException(400, str(e))

        min_length = body.min_word_length if body.min_word_length is not None else settings.MIN_WORD_LENGTH
        found = [seq for seq in found if len(seq.word) >= min_length]
        words = found[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else found
        logger.info("Found %d words (returning top %d)", len(found), len(words))

        result = {
            "rows": rows,
            "cols": cols,
            "words": [
                {"word": seq.word, "value": seq.total_value, "path": [list(p) for p in seq.path]}
                for seq in words
            ],
            "word_count": len(words),
            "total_found": len(found),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }

        if settings.DEBUG:
            _save_debug_result(grid, scores, result)

        return JSONResponse(result)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordament.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordament.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def _save_debug_result(grid, scores, result):
    import json
    from datetime import datetime

    debug_dir = settings.BASE_DIR / "debug"
    debug_dir.mkdir(exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

    with open(debug_dir / f"{ts}_result.json", "w") as f:
        json.dump({"timestamp": ts, "grid": grid, "scores": scores, **result}, f, indent=2)

    logger.info("Saved debug result to debug/%s_result.json", ts)


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
