from fastapi import Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers


class PreflightCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware that answers every OPTIONS request with an empty 204.

    Allowed origins are echoed back; any other origin (or none) gets the
    preflight headers without Access-Control-Allow-Origin.
    """

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            response = self.preflight_response(request_headers=Headers(scope=scope))
            await response(scope, receive, send)
            return
        await super().__call__(scope, receive, send)

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        headers.pop("Access-Control-Allow-Origin", None)

        origin = request_headers.get("origin")
        if origin and self.is_allowed_origin(origin=origin):
            headers["Access-Control-Allow-Origin"] = origin

        return Response(status_code=204, headers=headers)
