from fastapi import APIRouter

from ..models.scan import GuidanceResponse
from ..services.guidance import get_guidance

router = APIRouter(prefix="/guidance", tags=["Guidance"])


@router.get("", response_model=GuidanceResponse)
def guidance_route() -> GuidanceResponse:
    return get_guidance()
