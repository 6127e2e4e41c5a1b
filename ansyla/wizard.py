"""
The wizard controller: the step cursor, the answer set, the current
validation error, and the submission guard. Everything the UI does goes
through `advance`, `retreat` and `edit`; the UI re-renders when notified.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Protocol
from collections.abc import Callable

from .errors import SubmissionError
from .notifications import AlertSink
from .form_data_builder import AnswerSet, empty_answer_set
from .step_definitions import (
    STEPS_BY_ID, INTRO_STEP_ID, LAST_STEP_ID,
    execute_step_validators, field_key_for_step,
    calculate_next_step_id, calculate_prev_step_id, calculate_progress
)
from .utils import FormField, StepDefinition

logger = logging.getLogger(__name__)


class WizardPhase(Enum):
    INTRO = 'intro'
    FIELD = 'field'
    SUBMITTING = 'submitting'
    DONE = 'done'


class SubmissionState(Enum):
    IDLE = 'idle'
    IN_FLIGHT = 'in_flight'
    COMPLETED = 'completed'


class SubmissionSink(Protocol):
    async def submit(self, answers: AnswerSet) -> None: ...


WizardListener = Callable[['WizardController'], None]


class WizardController:
    """One applicant's pass through the form. Not shared between sessions."""

    def __init__(self, gateway: SubmissionSink, alerts: AlertSink):
        self._gateway = gateway
        self._alerts = alerts
        self._answers: AnswerSet = empty_answer_set()
        self._listeners: list[WizardListener] = []
        self.step: int = INTRO_STEP_ID
        self.error: str | None = None
        self.submission_state: SubmissionState = SubmissionState.IDLE

    # --- Read-only views -------------------------------------------------

    @property
    def answers(self) -> AnswerSet:
        """A copy of the answers; mutate only through `edit`."""
        return AnswerSet(**self._answers)

    @property
    def phase(self) -> WizardPhase:
        if self.submission_state is SubmissionState.COMPLETED:
            return WizardPhase.DONE
        if self.submission_state is SubmissionState.IN_FLIGHT:
            return WizardPhase.SUBMITTING
        if self.step == INTRO_STEP_ID:
            return WizardPhase.INTRO
        return WizardPhase.FIELD

    @property
    def current_step(self) -> StepDefinition:
        return STEPS_BY_ID[self.step]

    @property
    def current_field(self) -> FormField | None:
        field_conf = self.current_step['field']
        return field_conf['field'] if field_conf else None

    @property
    def progress(self) -> float:
        return calculate_progress(self.step)

    @property
    def is_last_step(self) -> bool:
        return self.step == LAST_STEP_ID

    @property
    def can_advance(self) -> bool:
        return self.submission_state is SubmissionState.IDLE

    @property
    def can_retreat(self) -> bool:
        return self.phase is WizardPhase.FIELD

    def subscribe(self, listener: WizardListener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    # --- Transitions -----------------------------------------------------

    def edit(self, field_key: str, value: str) -> bool:
        """Updates the field shown on the current step and clears its error.

        Edits to any other field, or outside a field step, are rejected.
        """
        if self.phase is not WizardPhase.FIELD or field_key != field_key_for_step(self.step):
            logger.warning(f"Rejected edit of '{field_key}' at step {self.step} ({self.phase.value}).")
            return False
        self._answers[field_key] = value  # type: ignore[literal-required]
        self.error = None
        self._notify()
        return True

    def retreat(self) -> bool:
        if not self.can_retreat:
            logger.warning(f"Retreat ignored at step {self.step} ({self.phase.value}).")
            return False
        self.step = calculate_prev_step_id(self.step)
        self.error = None
        logger.info(f"Moved back to step {self.step}.")
        self._notify()
        return True

    async def advance(self) -> bool:
        """
        Validates the current step and moves forward. On the last step a
        valid answer set is submitted instead. Returns True when the cursor
        moved or the submission went through.
        """
        if not self.can_advance:
            logger.warning(f"Advance ignored while submission is {self.submission_state.value}.")
            return False

        is_valid, msg = execute_step_validators(self.current_step, self._answers)
        if not is_valid:
            self.error = msg
            logger.info(f"Step {self.step} failed validation: {msg}")
            self._notify()
            return False

        self.error = None
        if not self.is_last_step:
            self.step = calculate_next_step_id(self.step)
            logger.info(f"Advanced to step {self.step}.")
            self._notify()
            return True
        return await self._submit()

    async def _submit(self) -> bool:
        self.submission_state = SubmissionState.IN_FLIGHT
        self._notify()
        succeeded = False
        try:
            await self._gateway.submit(self.answers)
            succeeded = True
        except SubmissionError as e:
            logger.error(f"Failed to send application: {e}")
            self._alerts.schedule(e.user_message)
        finally:
            # Back to idle on any failure so the applicant can retry.
            self.submission_state = SubmissionState.COMPLETED if succeeded else SubmissionState.IDLE
            self._notify()
        if succeeded:
            logger.info("Application submitted.")
        return succeeded
