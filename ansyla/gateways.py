"""HTTP clients for the two external endpoints.

- SubmissionGateway posts the finished answer set to the application webhook.
- SummaryGateway asks a generative-text model for a short applicant summary.

Both raise a GatewayError subclass on any failure and never return partial
results. Callers decide how the failure reaches the applicant.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import SubmissionError, SummaryError
from .form_data_builder import AnswerSet, build_submission_payload

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = 'Application failed to send. Please try again.'
CONNECTION_FAILED_MESSAGE = 'An error occurred. Please check your internet connection and try again.'
SUMMARY_FAILED_MESSAGE = 'Could not generate a summary. Please try again.'
SUMMARY_EMPTY_MESSAGE = 'The summary service returned an empty response. Please try again.'


class SubmissionGateway:
    """Posts the answer set to the application webhook."""

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    async def submit(self, answers: AnswerSet) -> None:
        """POST the answers as JSON. Any 2xx is success; the body is ignored."""
        payload = build_submission_payload(answers)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={'Content-Type': 'application/json'},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SubmissionError(0, f"Request failed: {e}", CONNECTION_FAILED_MESSAGE) from e

        if not response.is_success:
            raise SubmissionError(response.status_code, response.reason_phrase, SUBMISSION_FAILED_MESSAGE)
        logger.info(f"Form data successfully sent to webhook: {payload}")


def extract_first_candidate_text(data: Any) -> str | None:
    """Pulls `candidates[0].content.parts[0].text` out of a generation response."""
    try:
        text = data['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text.strip():
        return None
    return text.strip()


class SummaryGateway:
    """Client for a `generateContent`-style text generation endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Sends one prompt and returns the first candidate's text."""
        body = {'contents': [{'role': 'user', 'parts': [{'text': prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.endpoint, params={'key': self.api_key}, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SummaryError(0, f"Request failed: {e}", CONNECTION_FAILED_MESSAGE) from e

        if not response.is_success:
            raise SummaryError(response.status_code, response.reason_phrase, SUMMARY_FAILED_MESSAGE)

        try:
            data = response.json()
        except ValueError as e:
            raise SummaryError(response.status_code, f"Response is not JSON: {e}", SUMMARY_EMPTY_MESSAGE) from e

        text = extract_first_candidate_text(data)
        if text is None:
            raise SummaryError(response.status_code, "No candidate text in response", SUMMARY_EMPTY_MESSAGE)
        return text
