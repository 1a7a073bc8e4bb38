"""Pydantic schemas for neighborhoods."""

from pydantic import BaseModel


class NeighborhoodOut(BaseModel):
    id: int
    name: str | None = None
