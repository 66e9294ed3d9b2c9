from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ClassStatusUpdate(BaseModel):
    """Admin decision; any truthy feedback denies the class."""

    feedback: Any = None
