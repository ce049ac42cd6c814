"""
Response envelope helpers for consistent response formatting.

Envelopes used by the API:
- Success: { "success": true, ...fields }  e.g. {"success": true, "order": {...}}
- Error:   { "success": false, "message": "...", "code": "..." }
- Listings are bare JSON arrays of orders.
"""
from typing import Any

from pydantic import BaseModel, Field


class StandardErrorResponse(BaseModel):
    """Standard error response envelope."""
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code (e.g., 'not_found', 'validation_error')")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")


def success_response(**fields: Any) -> dict[str, Any]:
    """
    Create a success envelope.

    Returns:
        dict: { "success": true, **fields }
    """
    response = {"success": True}
    response.update(fields)
    return response


def error_response(message: str, code: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Create an error envelope.

    Returns:
        dict: { "success": false, "message": <message>, "code": <code> }
    """
    response = {"success": False, "message": message, "code": code}
    if details:
        response["details"] = details
    return response
