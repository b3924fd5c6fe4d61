from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Any, Dict, List, Mapping, Optional


class GatewayFailure(Exception):
    """Transport-level or unexpected failure talking to the clinic API"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class ValidationFailure(GatewayFailure):
    """Application-level rejection of a submitted draft, keyed by field"""

    def __init__(self, errors: Mapping[str, str], message: str = "Validation failed", status: Optional[int] = None):
        super().__init__(message, status)
        self.errors: Dict[str, str] = dict(errors)


class ModalStateError(Exception):
    """Raised when a page operation is called from the wrong modal state"""


class FieldValidationError(Exception):
    """Server-side rule violation detected after schema validation (uniqueness, references)"""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__("Validation failed")
        self.errors = errors


def normalize_errors(errors: Mapping[str, Any]) -> Dict[str, str]:
    """Collapse an error payload into one message per field.

    Accepts both `{field: "message"}` and the list form `{field: ["message", ...]}`.
    """
    normalized: Dict[str, str] = {}
    for field, value in errors.items():
        if isinstance(value, (list, tuple)):
            value = next((str(v) for v in value if v), "")
        if value:
            normalized[str(field)] = str(value)
    return normalized


def create_error_response(message: str, errors: Optional[Dict[str, Any]] = None) -> dict:
    """Create a standardized error response"""
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
    }
    if errors is not None:
        body["errors"] = errors
    return body


def create_success_response(message: str, data: Any = None) -> dict:
    """Create a standardized success response"""
    return {
        "success": True,
        "message": message,
        "data": data,
    }


def validation_errors_from_pydantic(errors: List[Dict[str, Any]], skip_prefixes=("body",)) -> Dict[str, List[str]]:
    """Turn pydantic error dicts into a dotted-field -> messages map"""
    out: Dict[str, List[str]] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if str(part) not in skip_prefixes]
        field = ".".join(loc) or "__root__"
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        out.setdefault(field, []).append(msg)
    return out


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail))
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=create_error_response("Validation failed", validation_errors_from_pydantic(exc.errors()))
    )


async def field_validation_handler(request: Request, exc: FieldValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=create_error_response("Validation failed", exc.errors)
    )
