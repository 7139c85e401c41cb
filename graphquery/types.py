"""Pydantic models describing arena contents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class VertexSpec(BaseModel):
    """One vertex of an id-indexed arena."""

    id: str = Field(..., min_length=1)
    data: Any
    neighbors: list[str] = Field(
        default_factory=list,
        description="Ids of outgoing neighbors, in order. May repeat or name the vertex itself",
    )


class AirportSpec(BaseModel):
    """One airport of a flight network."""

    code: str = Field(..., min_length=1)
    outbound: list[str] = Field(
        default_factory=list,
        description="Codes of airports served by a direct flight",
    )
