import json
import logging
import re

import requests
from pydantic import ValidationError

from .config import Settings
from .exceptions import CompletionGatewayError, JudgeParseError
from .models import CompletionRequest, CompletionResult, JudgeScore

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


# -------------------------------
# Completion provider (OpenAI-compatible chat API)
# -------------------------------
class CompletionGateway:
    """
    Sends one chat-completion request per call.

    No retries, caching or batching; any provider failure surfaces as
    CompletionGatewayError.
    """

    def __init__(self, api_key: str, base_url: str, model: str, timeout: float = 60.0):
        self.api_key = api_key
        self.url = base_url.rstrip("/") + "/chat/completions"
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionGateway":
        if not settings.openai_api_key:
            raise RuntimeError("Set OPENAI_API_KEY env var in .env file or environment")
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            timeout=settings.openai_timeout,
        )

    def complete(self, request: CompletionRequest) -> CompletionResult:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [m.model_dump() for m in request.messages],
            "max_tokens": request.max_output_tokens,
            "temperature": request.temperature,
        }
        logger.debug(
            "Requesting completion: model=%s messages=%d max_tokens=%d",
            self.model, len(request.messages), request.max_output_tokens,
        )
        try:
            resp = requests.post(self.url, headers=headers, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except requests.RequestException as e:
            raise CompletionGatewayError(f"Completion request failed: {e}") from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise CompletionGatewayError(f"Unusable completion response: {e}") from e

        if not isinstance(content, str):
            raise CompletionGatewayError("Completion response has no text content")
        return CompletionResult(text=content)


# -------------------------------
# Judge output parsing
# -------------------------------
def parse_judge_score(text: str) -> JudgeScore:
    """Parse the judge's JSON reply; a surrounding ``` fence is allowed."""
    raw = text.strip()
    m = _CODE_FENCE.match(raw)
    if m:
        raw = m.group(1)
    try:
        return JudgeScore.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        raise JudgeParseError(f"Judge output is not a valid score: {e}") from e
