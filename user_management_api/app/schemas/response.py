"""
Response envelope shared by all endpoints.

Every reply carries ``success`` and ``code`` (the HTTP status).
Successful replies add ``data`` and, for mutations, a ``message``;
failed replies carry an ``error`` string instead.
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class APIResponse(BaseModel):
    success: bool
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None
    code: int

    def to_response(self) -> JSONResponse:
        """Render the envelope, leaving out fields that are ``None``.

        An empty list is not ``None``, so an empty search result is
        still returned as ``"data": []``.
        """
        body = self.model_dump(mode="json", exclude_none=True)
        return JSONResponse(status_code=self.code, content=body)


def success_response(data: Any = None, message: Optional[str] = None, code: int = 200) -> JSONResponse:
    return APIResponse(success=True, data=data, message=message, code=code).to_response()


def error_response(error: str, code: int) -> JSONResponse:
    return APIResponse(success=False, error=error, code=code).to_response()
