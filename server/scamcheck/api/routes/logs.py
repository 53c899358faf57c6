from fastapi import APIRouter
from scamcheck.core.logger import clear_logs, get_logs

router = APIRouter()


@router.get("/logs")
def fetch_logs():
    """Return buffered backend logs, including raw model output."""
    return {"logs": get_logs()}


@router.delete("/logs")
def delete_logs():
    clear_logs()
    return {"status": "cleared"}
