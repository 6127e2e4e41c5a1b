# ansyla/summary.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Protocol

from .errors import SummaryError
from .notifications import AlertSink
from .form_data_builder import AnswerSet
from .utils import AppSchema

logger = logging.getLogger(__name__)

# Fields that must be filled before a summary makes sense.
SUMMARY_REQUIRED_FIELDS: tuple[str, ...] = (
    AppSchema.NAME.key, AppSchema.EMAIL.key, AppSchema.QUALIFICATION.key,
)

PROMPT_TEMPLATE: str = (
    "Write a concise, professional summary (no more than 150 words) of a candidate "
    "applying for a work-from-home position, based on the following details:\n"
    "Name: {name}\n"
    "Email: {email}\n"
    "Phone: {phone}\n"
    "Gender: {gender}\n"
    "Country: {country}\n"
    "City: {city}\n"
    "Highest Qualification: {qualification}\n"
    "Highlight what makes the candidate a good fit for remote work."
)


class SummaryState(Enum):
    IDLE = 'idle'
    IN_FLIGHT = 'in_flight'
    DONE = 'done'


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


def can_summarize(answers: AnswerSet) -> bool:
    return all(str(answers.get(key, '')).strip() for key in SUMMARY_REQUIRED_FIELDS)

def build_summary_prompt(answers: AnswerSet) -> str:
    """Interpolates every answer into the prompt, with option codes shown by label."""
    values = {
        f.key: f.display_value(str(answers.get(f.key, ''))).strip() or 'Not provided'
        for f in AppSchema.get_all_fields()
    }
    return PROMPT_TEMPLATE.format(**values)


class SummaryGenerator:
    """
    Optional narrative summary of the current answers. Independent of the
    wizard's step cursor and submission state; it only reads the answers.
    """

    def __init__(self, generator: TextGenerator, alerts: AlertSink):
        self._generator = generator
        self._alerts = alerts
        self.state: SummaryState = SummaryState.IDLE
        self.summary: str | None = None

    @property
    def busy(self) -> bool:
        return self.state is SummaryState.IN_FLIGHT

    def is_available(self, answers: AnswerSet) -> bool:
        return not self.busy and can_summarize(answers)

    async def generate(self, answers: AnswerSet) -> str | None:
        """Returns the summary text, or None when skipped or failed."""
        if self.busy:
            logger.warning("Summary generation already in progress; ignoring request.")
            return None
        if not can_summarize(answers):
            logger.warning("Summary requested before name, email and qualification were filled in.")
            return None

        self.state = SummaryState.IN_FLIGHT
        text: str | None = None
        try:
            text = await self._generator.generate(build_summary_prompt(answers))
        except SummaryError as e:
            logger.error(f"Summary generation failed: {e}")
            self._alerts.schedule(e.user_message)
        finally:
            self.state = SummaryState.DONE if text is not None else SummaryState.IDLE
        if text is not None:
            self.summary = text
            logger.info("Summary generated.")
        return text
