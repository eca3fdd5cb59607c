import json

import pytest

from jobguard.config import Settings
from jobguard.services.session import ScanSession

TEST_INPUT = (
    "Data Entry Clerk - Remote. Earn $4,500 per week typing simple documents from home. "
    "No experience needed, immediate start! Contact hr.manager.jobs@gmail.com on WhatsApp "
    "and pay a one-time $99 equipment fee to secure your training kit today."
)

LEGIT_INPUT = (
    "Acme Corp is hiring a Senior Backend Engineer in Berlin. You will design and maintain "
    "payment services in Python and PostgreSQL. Apply through careers.acme.com; interviews "
    "are held on-site with the platform team."
)

SCAM_VERDICT = {
    "status": "Scam",
    "risk_score": 92,
    "primary_reason": "The posting promises unrealistic pay and asks for an upfront equipment fee.",
    "red_flags": ["Unrealistic Salary", "Request for Payment", "Suspicious Contact"],
    "recommendations": ["Do not pay any fees.", "Report the posting to the job board."],
}

LEGIT_VERDICT = {
    "status": "Legitimate",
    "risk_score": 8,
    "primary_reason": "The role has specific duties and an official application channel.",
    "red_flags": [],
    "recommendations": ["Verify the recruiter on the company's careers page."],
}


class FakeAnalyzer:
    """Plays back a scripted list of outcomes: strings are returned, exceptions raised."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def generate(self, prompt, system_instruction):
        self.calls.append((prompt, system_instruction))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class SleepRecorder:
    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def cfg() -> Settings:
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def session(cfg) -> ScanSession:
    return ScanSession.from_settings(cfg)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def scam_json() -> str:
    return json.dumps(SCAM_VERDICT)


@pytest.fixture
def legit_json() -> str:
    return json.dumps(LEGIT_VERDICT)
