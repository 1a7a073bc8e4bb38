"""Pydantic schemas for incident codes."""

from pydantic import BaseModel


class CodeOut(BaseModel):
    """Incident code response schema."""

    code: int
    type: str | None = None
