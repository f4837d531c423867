"""FastAPI application exposing encode and analyze over HTTP.

WHY: Services written in other languages (a search backend, an ETL job,
a CRM deduplication task) need phonetic keys without embedding Python.
FastAPI gives request validation and OpenAPI docs for free.

HOW: Four endpoints. POST /encode encodes a batch of words and reports
blank words per item instead of failing the whole batch. POST /analyze
runs a tokenizer plus the phonetic filter. GET /tokenizers and
GET /health are for discovery and liveness.

RULES:
- encode is pure and fast, so handlers run inline (no background tasks)
- Unknown tokenizer → 400 with ErrorResponse
- Malformed bodies → 422 from pydantic validation
- run_api() binds to config.API_HOST / config.API_PORT
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from ptbr_metaphone import __version__, config
from ptbr_metaphone.analysis import TOKENIZERS, analyze
from ptbr_metaphone.core.errors import InvalidInput
from ptbr_metaphone.core.metaphone import encode
from ptbr_metaphone.server.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    EncodeRequest,
    EncodeResponse,
    EncodeResult,
    ErrorResponse,
    HealthResponse,
    TokenModel,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Brazilian-Portuguese Metaphone API",
    description=(
        "Phonetic codes for Brazilian-Portuguese words. Encode word batches "
        "or analyze text into tokens with stacked or replaced phonetic codes."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Encoding
# ---------------------------------------------------------------------------


@app.post(
    "/encode",
    response_model=EncodeResponse,
    tags=["encoding"],
    summary="Encode a batch of words",
    description=(
        "Returns one result per word, in order. Blank words do not fail the "
        "request; their result carries an error message instead of a code."
    ),
    responses={
        422: {"description": "Empty or oversized word list"},
    },
)
async def encode_words(request: EncodeRequest) -> EncodeResponse:
    results = []
    for word in request.words:
        try:
            results.append(EncodeResult(word=word, code=encode(word)))
        except InvalidInput as exc:
            results.append(EncodeResult(word=word, error=str(exc)))
    logger.info("Encoded %d word(s)", len(results))
    return EncodeResponse(results=results)


@app.post(
    "/analyze",
    response_model=AnalyzeResponse,
    tags=["encoding"],
    summary="Tokenize text and apply the phonetic filter",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown tokenizer"},
    },
)
async def analyze_text(request: AnalyzeRequest) -> AnalyzeResponse:
    try:
        tokens = analyze(request.text, tokenizer=request.tokenizer, inject=request.inject)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    logger.info("Analyzed %d chars into %d token(s)", len(request.text), len(tokens))
    return AnalyzeResponse(tokens=[TokenModel(**t.to_dict()) for t in tokens])


# ---------------------------------------------------------------------------
# Endpoints: Discovery and health
# ---------------------------------------------------------------------------


@app.get(
    "/tokenizers",
    response_model=List[str],
    tags=["discovery"],
    summary="List available tokenizers",
)
async def list_tokenizers() -> List[str]:
    return sorted(TOKENIZERS.keys())


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the ptbr-metaphone-api console script."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
