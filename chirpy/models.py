from __future__ import annotations

from pydantic import BaseModel, StrictStr, field_validator


# === API Schemas ===


class ChirpIn(BaseModel):
    body: StrictStr = ""

    @field_validator("body", mode="before")
    @classmethod
    def null_body_is_empty(cls, value):
        # {"body": null} reads as an empty chirp
        return "" if value is None else value


class CleanedChirp(BaseModel):
    cleaned_body: str


class ErrorOut(BaseModel):
    error: str
