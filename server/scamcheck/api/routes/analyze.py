from fastapi import APIRouter, Request

from scamcheck.models.schemas import AnalyzeRequest, ClassificationResult, ErrorResponse

router = APIRouter()


@router.post(
    "/analyze",
    response_model=ClassificationResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_text(payload: AnalyzeRequest, request: Request):
    """Classify text as Scam, Online Gambling, Hoax or Safe."""
    gateway = request.app.state.gateway
    return await gateway.classify(payload.text)
