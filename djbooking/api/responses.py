from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable

from fastapi.responses import JSONResponse

from djbooking.domain.entities.field_error import FieldError


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def success(data: Any = None, message: str = "Success", status_code: int = 200) -> JSONResponse:
    body: dict[str, Any] = {"success": True, "message": message, "timestamp": _timestamp()}
    if data is not None:
        body["data"] = data
    return JSONResponse(status_code=status_code, content=body)


def error(message: str = "Internal Server Error", status_code: int = 500, **extra: Any) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message, **extra, "timestamp": _timestamp()}
    return JSONResponse(status_code=status_code, content=body)


def not_found(resource: str = "Resource") -> JSONResponse:
    return error(f"{resource} not found", 404)


def validation_error(errors: Iterable[FieldError]) -> JSONResponse:
    return error("Validation failed", 400, errors=[e.to_json() for e in errors])
