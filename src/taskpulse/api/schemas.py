"""HTTP request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BroadcastRequest(BaseModel):
    type: str = Field(min_length=1)
    data: Any = None
