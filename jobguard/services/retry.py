import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from ..errors import ExhaustedRetriesError, TransientRequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]

_RETRYABLE_CLIENT_STATUSES = {408, 429}


def backoff_delay(retry_number: int, base_seconds: float = 1.0) -> float:
    """Delay before retry ``retry_number`` (1-based): base, 2*base, 4*base, ..."""
    if retry_number < 1:
        raise ValueError("retry_number starts at 1")
    return base_seconds * 2 ** (retry_number - 1)


def is_retryable(exc: TransientRequestError, retry_client_errors: bool = True) -> bool:
    if retry_client_errors or exc.status_code is None:
        return True
    if 400 <= exc.status_code < 500:
        return exc.status_code in _RETRYABLE_CLIENT_STATUSES
    return True


async def retry_with_backoff(
    attempt: Callable[[int], Awaitable[T]],
    *,
    max_retries: int = 5,
    base_seconds: float = 1.0,
    retry_client_errors: bool = True,
    sleep: Optional[Sleep] = None,
) -> T:
    """Run ``attempt`` until it succeeds, at most ``max_retries + 1`` times.

    ``attempt`` receives the 1-based attempt number. Only TransientRequestError
    (and its MalformedResponseError subclass) is retried; anything else
    propagates immediately. When every attempt fails, ExhaustedRetriesError is
    raised carrying the attempt count and the last failure.
    """
    sleep = sleep or asyncio.sleep
    total_attempts = max_retries + 1

    for attempt_number in range(1, total_attempts + 1):
        try:
            return await attempt(attempt_number)
        except TransientRequestError as exc:
            if not is_retryable(exc, retry_client_errors):
                logger.error(
                    "Attempt %d/%d failed with non-retryable status %s; giving up.",
                    attempt_number, total_attempts, exc.status_code,
                )
                raise ExhaustedRetriesError(attempt_number, exc, stopped_early=True) from exc

            if attempt_number == total_attempts:
                logger.error("All %d attempts failed. Last error: %s", total_attempts, exc)
                raise ExhaustedRetriesError(attempt_number, exc) from exc

            delay = backoff_delay(attempt_number, base_seconds)
            logger.warning(
                "Attempt %d/%d failed (%s). Retrying in %.1fs...",
                attempt_number, total_attempts, exc, delay,
            )
            await sleep(delay)

    raise ExhaustedRetriesError(total_attempts)
