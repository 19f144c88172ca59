from dataclasses import asdict, is_dataclass
from fastapi.responses import JSONResponse
from typing import Any, Optional
from pydantic import BaseModel


def serialize_data(data: Any):
    """Convert result dataclasses and Pydantic models to plain JSON values."""
    if hasattr(data, "to_dict"):
        return serialize_data(data.to_dict())
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if is_dataclass(data) and not isinstance(data, type):
        return serialize_data(asdict(data))
    if isinstance(data, (list, tuple)):
        return [serialize_data(item) for item in data]
    if isinstance(data, dict):
        return {key: serialize_data(value) for key, value in data.items()}
    return data


def success_response(
    message: str, data: Optional[Any] = None, status_code: int = 200
) -> JSONResponse:
    serialized_data = serialize_data(data)

    return JSONResponse(
        status_code=status_code,
        content={
            "status": "success",
            "message": message,
            "data": serialized_data,
        },
    )
