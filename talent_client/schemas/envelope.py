"""
The uniform response envelope shared by all JSON endpoints.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ApiEnvelope(BaseModel):
    """``{success, data?, error?}`` as sent by the backend, plus ``message``."""
    success: bool = False
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None

    model_config = {"extra": "allow"}
