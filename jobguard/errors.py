from typing import Optional

EXHAUSTED_MESSAGE = "Unable to complete analysis. Please try again later."
IN_PROGRESS_MESSAGE = "An analysis is already running. Wait for it to finish before submitting again."
NOT_CONFIGURED_MESSAGE = "The analysis service is not configured. Please try again later."


def validation_message(min_chars: int = 50) -> str:
    return f"Please provide a more detailed job description (at least {min_chars} characters)."


class JobGuardError(Exception):
    user_message = EXHAUSTED_MESSAGE


class ValidationError(JobGuardError, ValueError):
    def __init__(self, min_chars: int = 50):
        self.min_chars = min_chars
        self.user_message = validation_message(min_chars)
        super().__init__(self.user_message)


class AnalysisInProgressError(JobGuardError):
    user_message = IN_PROGRESS_MESSAGE


class TransientRequestError(JobGuardError):
    """A single attempt failed: non-2xx status or transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(TransientRequestError):
    """The model answered 2xx but the body is not a usable verdict."""


class ExhaustedRetriesError(JobGuardError, RuntimeError):
    def __init__(self, attempts: int, last_error: Optional[Exception] = None, stopped_early: bool = False):
        if stopped_early:
            message = f"Analysis stopped after {attempts} attempts on a non-retryable error: {last_error}"
        else:
            message = f"Analysis failed after {attempts} attempts: {last_error}"
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error
        self.stopped_early = stopped_early


class MissingCredentialError(JobGuardError, RuntimeError):
    user_message = NOT_CONFIGURED_MESSAGE
