from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

import requests
from django.conf import settings

from .exceptions import AdvisorError, PaymentRequired, RateLimited
from .prompts import build_contents

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response from Gemini"


def extract_reply(payload) -> str:
    """Text of the first candidate's first part, or a fixed fallback."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE
    return text if text is not None else NO_RESPONSE


class GeminiAdvisorClient:
    """
    Thin proxy to the Gemini generateContent endpoint.

    Upstream 429 becomes RateLimited and 402 becomes PaymentRequired so the
    views can tell the student which one happened. Everything else is an
    AdvisorError. Nothing is retried.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 endpoint: Optional[str] = None, timeout: Optional[float] = None,
                 session=None):
        self.api_key = api_key if api_key is not None else getattr(settings, "GEMINI_API_KEY", "")
        self.model = model or settings.CAREER_ADVISOR_MODEL
        self.endpoint = endpoint or settings.CAREER_ADVISOR_ENDPOINT
        self.timeout = timeout or settings.CAREER_ADVISOR_TIMEOUT
        self.session = session or requests

    @property
    def url(self) -> str:
        return self.endpoint.format(model=self.model)

    def advise(self, user_input: str, prior_turns: Iterable[Mapping] = ()) -> str:
        if not self.api_key:
            raise AdvisorError("Missing GEMINI_API_KEY")

        body = {"contents": build_contents(user_input, prior_turns)}
        try:
            resp = self.session.post(
                self.url,
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Career advisor request failed: %s", exc)
            raise AdvisorError("Could not reach the career advisor") from exc

        if resp.status_code == 429:
            logger.warning("Career advisor rate limited")
            raise RateLimited()
        if resp.status_code == 402:
            logger.warning("Career advisor returned payment required")
            raise PaymentRequired()
        if not resp.ok:
            logger.error("Gemini error: %s %s", resp.status_code, resp.text[:500])
            raise AdvisorError("Gemini request failed", status=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise AdvisorError("Gemini returned an unreadable response") from exc
        return extract_reply(payload)


def get_client() -> GeminiAdvisorClient:
    return GeminiAdvisorClient()
