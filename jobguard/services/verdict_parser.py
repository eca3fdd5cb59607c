import json

from pydantic import ValidationError as SchemaError

from ..errors import MalformedResponseError
from ..models.verdict import Verdict


def _strip_code_fences(text: str) -> str:
    raw = text.strip()
    if not raw.startswith("```"):
        return raw
    # Gemini sometimes fences the JSON despite responseMimeType
    raw = raw.strip("`").strip()
    if raw.lower().startswith("json"):
        raw = raw[4:]
    return raw.strip()


def parse_verdict(text: str | None) -> Verdict:
    """Turn the model's generated text into a validated Verdict.

    Any problem (no text, invalid JSON, wrong shape, out-of-range values)
    raises MalformedResponseError so the caller can spend a retry on it.
    """
    if not text or not text.strip():
        raise MalformedResponseError("Model returned no text.")

    raw = _strip_code_fences(text)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Model output is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}.")

    try:
        return Verdict.model_validate(data)
    except SchemaError as exc:
        raise MalformedResponseError(
            f"Model output does not match the verdict schema ({exc.error_count()} errors)."
        ) from exc
