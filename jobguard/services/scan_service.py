import logging
from typing import Optional, Protocol

from ..config import Settings, settings
from ..errors import (
    AnalysisInProgressError,
    ExhaustedRetriesError,
    MissingCredentialError,
    ValidationError,
)
from ..models.verdict import Verdict
from .retry import Sleep, retry_with_backoff
from .session import ScanSession
from .verdict_parser import parse_verdict

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = """\
You are an expert cybersecurity analyst specializing in recruitment fraud.
Your task is to analyze the provided job description and decide whether it is
a "Scam", "Suspicious", or "Legitimate".

Look for these red flags:
1. Unrealistic Salary: high pay for simple tasks.
2. Vague Job Description: no specific duties or requirements.
3. Poor Grammar/Spelling: unprofessional language.
4. Suspicious Contact: personal email addresses (gmail/yahoo) for senior roles.
5. Sense of Urgency: "Immediate start", "No experience needed".
6. Request for Payment: fees for "training", "equipment", or "background checks".

Return a JSON object with exactly these fields:
- "status": one of "Scam", "Suspicious", or "Legitimate"
- "risk_score": integer 0-100 (100 = definitely a scam)
- "primary_reason": a one-sentence summary
- "red_flags": array of the specific indicators found
- "recommendations": array of advice for the candidate

Respond with only valid JSON. No markdown, no extra text.\
"""


def build_prompt(job_text: str) -> str:
    return f"Analyze this job description: \n\n{job_text}"


class Analyzer(Protocol):
    async def generate(self, prompt: str, system_instruction: str) -> Optional[str]: ...


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------

async def submit_for_analysis(
    session: ScanSession,
    job_text: str,
    analyzer: Analyzer,
    cfg: Settings = settings,
    sleep: Optional[Sleep] = None,
) -> Verdict:
    if session.in_progress:
        raise AnalysisInProgressError("An analysis is already in progress for this session.")

    session.job_text = job_text
    if len(job_text.strip()) < cfg.min_input_chars:
        exc = ValidationError(cfg.min_input_chars)
        session.error = exc.user_message
        raise exc

    session.in_progress = True
    session.error = None
    session.result = None
    logger.info("Starting analysis of a %d-character job description.", len(job_text))

    prompt = build_prompt(job_text)

    async def _attempt(attempt_number: int) -> Verdict:
        text = await analyzer.generate(prompt, SYSTEM_PROMPT)
        return parse_verdict(text)

    try:
        verdict = await retry_with_backoff(
            _attempt,
            max_retries=cfg.max_retries,
            base_seconds=cfg.backoff_base_seconds,
            retry_client_errors=cfg.retry_client_errors,
            sleep=sleep,
        )
    except (ExhaustedRetriesError, MissingCredentialError) as exc:
        session.error = exc.user_message
        raise
    finally:
        session.in_progress = False

    session.result = verdict
    entry = session.history.record_verdict(job_text, verdict)
    logger.info(
        "Analysis complete: status=%s risk_score=%d (history entry %d).",
        verdict.status, verdict.risk_score, entry.id,
    )
    return verdict


def reset(session: ScanSession) -> None:
    """Clear input, result and error. History is kept."""
    session.reset()
    logger.info("Session reset; %d history entries kept.", len(session.history))
