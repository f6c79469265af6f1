from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse


def success_response(data: Any = None, message: str = "Success") -> dict[str, Any]:
    return {"success": True, "message": message, "data": data}


def error_response(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )
