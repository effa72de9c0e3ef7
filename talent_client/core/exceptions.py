"""
Exceptions raised by the API client.
"""

from typing import Any, Optional


class ApiError(Exception):
    """
    The backend answered with a failure HTTP status.

    ``message`` is the ``error`` text from the response envelope when the
    backend supplied one, otherwise the fallback message of the operation
    family (for example "Failed to upload resume").
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint
        self.payload = payload

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.message!r}, status_code={self.status_code!r}, "
            f"endpoint={self.endpoint!r})"
        )
