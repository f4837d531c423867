"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. All fields
carry Field(description=...) so the /docs UI is self-explanatory.

RULES:
- EncodeRequest.words holds 1..MAX_WORDS_PER_REQUEST entries
- A blank word is not a request error; it gets code=None and an error
- Python 3.9+ compatible (Optional/List from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ptbr_metaphone.config import MAX_WORDS_PER_REQUEST


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class EncodeRequest(BaseModel):
    """Words to encode in one batch."""

    words: List[str] = Field(
        min_length=1,
        max_length=MAX_WORDS_PER_REQUEST,
        description="Words or hyphenated compounds, any letter case.",
    )

    model_config = {"json_schema_extra": {
        "examples": [{"words": ["Calcanhar", "brigadeiro-do-ar"]}]
    }}


class AnalyzeRequest(BaseModel):
    """Text to tokenize and run through the phonetic filter."""

    text: str = Field(description="Text to analyze.")
    tokenizer: Optional[str] = Field(
        default=None,
        description="Tokenizer key ('standard' or 'keyword'). Defaults to the server setting.",
    )
    inject: Optional[bool] = Field(
        default=None,
        description="True keeps original tokens and stacks the code; False replaces them.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class EncodeResult(BaseModel):
    """Outcome for a single word."""

    word: str = Field(description="The word as submitted.")
    code: Optional[str] = Field(
        default=None,
        description="Phonetic code, absent when the word could not be encoded.",
    )
    error: Optional[str] = Field(
        default=None,
        description="Why the word could not be encoded (blank input).",
    )


class EncodeResponse(BaseModel):
    results: List[EncodeResult] = Field(description="One result per submitted word, in order.")


class TokenModel(BaseModel):
    """A token in the analyzed stream."""

    text: str = Field(description="Token text (original word or phonetic code).")
    start: int = Field(description="Start character offset in the input text.")
    end: int = Field(description="End character offset (exclusive).")
    position_increment: int = Field(
        description="1 for a new position, 0 for a token stacked on the previous one.",
    )
    type: str = Field(description="'word' or 'phonetic'.")


class AnalyzeResponse(BaseModel):
    tokens: List[TokenModel] = Field(description="Filtered token stream.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
