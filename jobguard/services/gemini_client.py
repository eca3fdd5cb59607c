import asyncio
import logging
from typing import Any, Optional

import httpx
from google import genai
from google.genai import errors, types

from ..config import Settings
from ..errors import MalformedResponseError, MissingCredentialError, TransientRequestError

logger = logging.getLogger(__name__)


class GeminiClient:
    """One generateContent call per ``generate``; retries live in the caller.

    Every failure of a single call is reported as TransientRequestError:
    non-2xx responses carry their status code, transport failures carry none.
    """

    def __init__(self, cfg: Settings, client: Any = None):
        self._cfg = cfg
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            if not self._cfg.gemini_api_key:
                logger.error("GEMINI_API_KEY is not configured.")
                raise MissingCredentialError("GEMINI_API_KEY is not configured.")
            self._client = genai.Client(api_key=self._cfg.gemini_api_key)
        return self._client

    def _config(self, system_instruction: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            temperature=self._cfg.gemini_temperature,
        )

    async def generate(self, prompt: str, system_instruction: str) -> Optional[str]:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self._cfg.gemini_model,
                contents=prompt,
                config=self._config(system_instruction),
            )
        except errors.UnknownApiResponseError as exc:
            raise MalformedResponseError(f"Unparseable response body: {exc}") from exc
        except errors.APIError as exc:
            raise TransientRequestError(f"HTTP Error: {exc.code}", status_code=exc.code) from exc
        except (httpx.HTTPError, asyncio.TimeoutError, OSError) as exc:
            raise TransientRequestError(f"Transport failure: {type(exc).__name__}") from exc
        except Exception as exc:
            # aiohttp transport and other SDK internals
            raise TransientRequestError(f"Request failed: {type(exc).__name__}") from exc

        return response.text
