"""Success and error envelopes shared by every endpoint."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [dump(item) for item in value]
    return value


def success(data: Any = None, message: Optional[str] = None, pagination: Optional[BaseModel] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = dump(data)
    if pagination is not None:
        body["pagination"] = dump(pagination)
    return body


def error_response(
    request: Request,
    status_code: int,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body: Dict[str, Any] = {
        "error": True,
        "message": message,
        "statusCode": status_code,
        "timestamp": utc_timestamp(),
        "path": request.url.path,
        "method": request.method,
    }
    if errors:
        body["errors"] = jsonable_encoder(errors)
    return JSONResponse(status_code=status_code, content=body, headers=headers)
