from fastapi import Header, HTTPException, Request


async def get_api_key(request: Request, x_api_key: str = Header(None)):
    expected = request.app.state.settings.admin_api_key
    if x_api_key is None or not expected or x_api_key != expected:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return x_api_key
