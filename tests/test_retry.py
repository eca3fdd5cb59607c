import asyncio

import pytest

from conftest import SleepRecorder
from jobguard.errors import ExhaustedRetriesError, MalformedResponseError, TransientRequestError
from jobguard.services.retry import backoff_delay, is_retryable, retry_with_backoff


def _scripted(outcomes):
    calls = []

    async def attempt(n):
        calls.append(n)
        outcome = outcomes[n - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return attempt, calls


def test_backoff_delays_double_from_one_second():
    assert [backoff_delay(n) for n in range(1, 6)] == [1, 2, 4, 8, 16]
    assert backoff_delay(3, base_seconds=0.5) == 2.0


def test_backoff_delay_rejects_zero():
    with pytest.raises(ValueError):
        backoff_delay(0)


def test_succeeds_on_sixth_attempt():
    sleep = SleepRecorder()
    outcomes = [TransientRequestError("HTTP Error: 503", 503)] * 5 + ["ok"]
    attempt, calls = _scripted(outcomes)

    result = asyncio.run(retry_with_backoff(attempt, sleep=sleep))

    assert result == "ok"
    assert calls == [1, 2, 3, 4, 5, 6]
    assert sleep.delays == [1, 2, 4, 8, 16]


def test_gives_up_after_six_attempts():
    sleep = SleepRecorder()
    outcomes = [TransientRequestError("boom")] * 7
    attempt, calls = _scripted(outcomes)

    with pytest.raises(ExhaustedRetriesError) as info:
        asyncio.run(retry_with_backoff(attempt, sleep=sleep))

    assert calls == [1, 2, 3, 4, 5, 6]
    assert sleep.delays == [1, 2, 4, 8, 16]
    assert info.value.attempts == 6
    assert info.value.stopped_early is False
    assert isinstance(info.value.last_error, TransientRequestError)


def test_malformed_response_consumes_a_retry():
    sleep = SleepRecorder()
    attempt, calls = _scripted([MalformedResponseError("bad json"), "ok"])

    assert asyncio.run(retry_with_backoff(attempt, sleep=sleep)) == "ok"
    assert calls == [1, 2]
    assert sleep.delays == [1]


def test_unexpected_errors_are_not_retried():
    sleep = SleepRecorder()
    attempt, calls = _scripted([KeyError("bug"), "ok"])

    with pytest.raises(KeyError):
        asyncio.run(retry_with_backoff(attempt, sleep=sleep))
    assert calls == [1]
    assert sleep.delays == []


def test_client_errors_stop_early_when_configured():
    sleep = SleepRecorder()
    attempt, calls = _scripted([TransientRequestError("HTTP Error: 400", 400), "ok"])

    with pytest.raises(ExhaustedRetriesError) as info:
        asyncio.run(retry_with_backoff(attempt, retry_client_errors=False, sleep=sleep))

    assert calls == [1]
    assert info.value.attempts == 1
    assert info.value.stopped_early is True
    assert "non-retryable" in str(info.value)


def test_is_retryable_status_classes():
    assert is_retryable(TransientRequestError("x", 400))
    assert not is_retryable(TransientRequestError("x", 403), retry_client_errors=False)
    assert is_retryable(TransientRequestError("x", 429), retry_client_errors=False)
    assert is_retryable(TransientRequestError("x", 503), retry_client_errors=False)
    assert is_retryable(TransientRequestError("x"), retry_client_errors=False)
