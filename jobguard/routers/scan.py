from fastapi import APIRouter, HTTPException, Request, status

from ..errors import (
    AnalysisInProgressError,
    ExhaustedRetriesError,
    MissingCredentialError,
    ValidationError,
)
from ..models.scan import HistoryResponse, ScanRequest, ScanResponse, SessionStateResponse
from ..services import scan_service
from ..services.session import ScanSession

router = APIRouter(prefix="/scan", tags=["Scan"])


def _state(session: ScanSession) -> SessionStateResponse:
    return SessionStateResponse(
        job_text=session.job_text,
        in_progress=session.in_progress,
        can_submit=session.can_submit,
        result=session.result,
        error=session.error,
    )


# ─────────────────────────────────────────────
# POST /scan
# Validate → Gemini with backoff → Verdict + history
# ─────────────────────────────────────────────

@router.post(
    "",
    response_model=ScanResponse,
    summary="Classify a job posting",
    description=(
        "Sends the pasted job description to Gemini and returns a Scam / Suspicious / "
        "Legitimate verdict. Transient failures are retried with exponential backoff."
    ),
)
async def scan_route(body: ScanRequest, request: Request) -> ScanResponse:
    session: ScanSession = request.app.state.session
    try:
        verdict = await scan_service.submit_for_analysis(
            session,
            body.job_text,
            analyzer=request.app.state.analyzer,
            cfg=request.app.state.settings,
            sleep=request.app.state.sleep,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.user_message)
    except AnalysisInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.user_message)
    except (ExhaustedRetriesError, MissingCredentialError) as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.user_message)

    entries = session.history.entries()
    return ScanResponse(verdict=verdict, history=HistoryResponse(count=len(entries), entries=entries))


@router.get("", response_model=SessionStateResponse)
async def scan_state_route(request: Request) -> SessionStateResponse:
    return _state(request.app.state.session)


@router.post("/reset", response_model=SessionStateResponse)
async def reset_route(request: Request) -> SessionStateResponse:
    session: ScanSession = request.app.state.session
    scan_service.reset(session)
    return _state(session)
