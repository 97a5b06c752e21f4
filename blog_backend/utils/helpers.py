from datetime import UTC, datetime
from typing import Any

from fastapi import Request
from pydantic import BaseModel


def host(request: Request) -> str:
    """Return the client IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def utc_now() -> datetime:
    """Return the current UTC time, timezone-aware."""
    return datetime.now(tz=UTC)


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """
    Build the ``openapi_extra`` documenting a JSON body read by the handler itself.

    Routes parse their body inside the failure boundary, so FastAPI never
    validates it and the schema has to be declared by hand.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        },
    }
