"""Failures raised by the outbound gateways."""

from __future__ import annotations


class GatewayError(Exception):
    """Raised when an external endpoint fails or cannot be reached.

    `status_code` is 0 for transport-level failures. `user_message` is the
    text shown to the applicant in an alert.
    """
    def __init__(self, status_code: int, detail: str, user_message: str):
        self.status_code = status_code
        self.detail = detail
        self.user_message = user_message
        super().__init__(f"Gateway error {status_code}: {detail}")


class SubmissionError(GatewayError):
    """Raised when the application webhook rejects or never receives the answers."""


class SummaryError(GatewayError):
    """Raised when the text-generation service fails or returns an unusable response."""
