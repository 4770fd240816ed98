from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class DecodeOptions(BaseModel):
    """Settings threaded unchanged through every recursive decode call."""
    model_config = ConfigDict(frozen=True)

    # read string tags as raw binary (older wire data)
    compatibility: bool = False
    # None: no nesting limit
    max_depth: Optional[int] = Field(default=None, ge=1)
