import json
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from fastapi.routing import APIRoute

DEFAULT_MESSAGES = {
    "POST": "Creado exitosamente",
    "GET": "Obtenido exitosamente",
    "PUT": "Actualizado exitosamente",
    "PATCH": "Actualizado exitosamente",
    "DELETE": "Eliminado exitosamente",
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def envelope_message(method: str, path: str) -> str:
    message = DEFAULT_MESSAGES.get(method, "Operación exitosa")
    if method in ("PUT", "PATCH"):
        if path.endswith("/activar"):
            message = "Activado exitosamente"
        elif path.endswith("/desactivar"):
            message = "Desactivado exitosamente"
        elif path.endswith("/estado"):
            message = "Estado cambiado exitosamente"
    return message


def error_body(status_code: int, error: str, message: str, detail: Optional[Any] = None) -> dict:
    return {
        "success": False,
        "status_code": status_code,
        "error": error,
        "message": message,
        "detail": detail,
        "timestamp": _now_iso(),
    }


def wrap_response(request: Request, response: Response) -> Response:
    if response.status_code >= 400 or response.status_code == 204:
        return response
    if not (response.headers.get("content-type") or "").startswith("application/json"):
        return response

    data = json.loads(response.body) if response.body else None
    # already shaped responses pass through untouched
    if isinstance(data, dict) and "success" in data:
        return response

    wrapped = JSONResponse(
        content={
            "data": data,
            "message": envelope_message(request.method, request.url.path),
            "success": True,
            "timestamp": _now_iso(),
        },
        status_code=response.status_code,
        background=response.background,
    )
    for key, value in response.headers.items():
        if key.lower() not in ("content-length", "content-type"):
            wrapped.headers[key] = value
    return wrapped


class EnvelopeRoute(APIRoute):
    """Route class that wraps JSON payloads as {data, message, success, timestamp}."""

    def get_route_handler(self):
        original_handler = super().get_route_handler()

        async def envelope_handler(request: Request) -> Response:
            response = await original_handler(request)
            return wrap_response(request, response)

        return envelope_handler
