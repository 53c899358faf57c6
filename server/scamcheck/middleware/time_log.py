import time
from fastapi import Request
from fastapi.responses import JSONResponse

from scamcheck.core.logger import add_log


async def log_process_time(request: Request, call_next):
    """
    Time every request and turn unexpected exceptions into a JSON 500.

    Runs inside the CORS middleware, so even crash responses carry CORS
    headers and stay readable by the browser.
    """
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        add_log(f"[UNHANDLED_ERROR] {request.method} {request.url.path}: {type(e).__name__}: {str(e)[:200]}")
        response = JSONResponse(status_code=500, content={"error": "Internal server error."})
    process_time = time.time() - start_time
    add_log(f"[REQUEST] {request.method} {request.url.path} -> {response.status_code} in {process_time:.4f}s")
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    return response
