from fastapi import APIRouter, Request

from ..models.scan import HistoryResponse

router = APIRouter(prefix="/history", tags=["History"])


@router.get("", response_model=HistoryResponse)
async def history_route(request: Request) -> HistoryResponse:
    entries = request.app.state.session.history.entries()
    return HistoryResponse(count=len(entries), entries=entries)
