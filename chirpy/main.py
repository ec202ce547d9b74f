"""
Entrypoint for the Chirpy FastAPI application.

Routes:

* ``/app/*``                  static files, counted by `MetricsMiddleware`
* ``GET /admin/metrics``      HTML page with the file-server hit count
* ``/api/reset``              zero the hit count
* ``GET /api/healthz``        readiness probe
* ``POST /api/validate_chirp`` length check and profanity masking
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .chirps import MAX_CHIRP_LENGTH, replace_profane_words
from .files import ListingStaticFiles
from .metrics import HitCounter, MetricsMiddleware
from .models import ChirpIn, CleanedChirp, ErrorOut

logger = logging.getLogger(__name__)

RESET_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

METRICS_PAGE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


# === Helpers ===


def get_hits(request: Request) -> HitCounter:
    return request.app.state.hits


async def chirp_body(request: Request) -> ChirpIn:
    """Decode the request body as JSON whatever its Content-Type says."""
    try:
        return ChirpIn.model_validate_json(await request.body())
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        ErrorOut(error=message).model_dump(),
        status_code=status_code,
        headers=headers,
    )


def create_app(fileserver_root: Optional[str] = None) -> FastAPI:
    root = fileserver_root or os.environ.get("FILESERVER_ROOT", ".")
    app = FastAPI(title="Chirpy", version="1.0.0")
    app.state.hits = HitCounter()

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Error decoding JSON for %s: %s", request.url.path, exc.errors())
        return error_response(400, "Something went wrong")

    # === Health ===

    @app.get("/api/healthz", response_class=PlainTextResponse)
    def healthz() -> str:
        return "OK"

    # === Admin / metrics ===

    @app.get("/admin/metrics", response_class=HTMLResponse)
    def metrics(hits: HitCounter = Depends(get_hits)) -> str:
        return METRICS_PAGE.format(hits=hits.value)

    @app.api_route("/api/reset", methods=RESET_METHODS, response_class=PlainTextResponse)
    def reset(hits: HitCounter = Depends(get_hits)) -> str:
        hits.reset()
        logger.info("File server hit counter reset")
        return "Hits counter reset"

    # === Chirps ===

    @app.post("/api/validate_chirp", response_model=CleanedChirp)
    def validate_chirp(payload: ChirpIn = Depends(chirp_body)) -> CleanedChirp:
        if len(payload.body) > MAX_CHIRP_LENGTH:
            logger.info("Rejected chirp of %d characters", len(payload.body))
            raise HTTPException(status_code=400, detail="Chirp is too long")
        return CleanedChirp(cleaned_body=replace_profane_words(payload.body))

    # === Static files ===

    files = ListingStaticFiles(directory=root, html=True)
    app.mount("/app", MetricsMiddleware(files, counter=app.state.hits), name="app")

    return app


app = create_app()
