from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import RelayError


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Render an error in the envelope of the deployment serving the request."""
    if request.app.state.settings.is_chat:
        content = {"success": False, "error": message}
    else:
        content = {"error": message}
    return JSONResponse(status_code=status_code, content=content)


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(request, 400, "Invalid request body")
