from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scamcheck.core.errors import ValidationError
from scamcheck.core.logger import add_log


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    add_log(f"[VALIDATION_ERROR] Request validation failed: {errors}")

    if any(error.get("type") == "json_invalid" for error in errors):
        message = "Invalid JSON body."
    else:
        message = ValidationError.default_message

    return JSONResponse(status_code=400, content={"error": message})
