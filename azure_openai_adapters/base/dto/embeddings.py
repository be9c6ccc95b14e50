"""Pydantic DTO for embedding request bodies."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EmbeddingRequest(BaseModel):
    """Embeddings body: one string or a non-empty list of strings."""

    model_config = ConfigDict(extra="ignore")

    model: Optional[str] = Field(default=None, min_length=1)
    input: Union[str, List[str]]
    dimensions: Optional[int] = Field(default=None, gt=0)
    user: Optional[str] = None


__all__ = ["EmbeddingRequest"]
