# ansyla/step_definitions.py
from __future__ import annotations
from typing import Any

from .utils import AppSchema, StepDefinition
from .para import genders, countries, qualifications
from .validation import (
    ValidationResult, required, required_choice, one_of, match_pattern,
    run_validators, EMAIL_PATTERN, PHONE_PATTERN
)

INTRO_STEP_ID: int = 1

STEPS_BY_ID: dict[int, StepDefinition] = {
    1: {
        'id': 1, 'name': 'intro', 'title': 'Welcome',
        'subtitle': 'Apply to work from home with Ansyla. We will ask you a few short questions, one at a time.',
        'field': None,
    },
    2: {
        'id': 2, 'name': 'name', 'title': 'What is your name?',
        'subtitle': 'Your full name as it appears on official documents.',
        'field': {'field': AppSchema.NAME, 'validators': [required("Please enter your full name.")]},
    },
    3: {
        'id': 3, 'name': 'email', 'title': 'What is your email address?',
        'subtitle': 'We will use it to contact you about your application.',
        'field': {'field': AppSchema.EMAIL, 'validators': [
            required("Please enter your email address."),
            match_pattern(EMAIL_PATTERN, "Please enter a valid email address."),
        ]},
    },
    4: {
        'id': 4, 'name': 'phone', 'title': 'What is your phone number?',
        'subtitle': 'Digits only, including the country code if you have one.',
        'field': {'field': AppSchema.PHONE, 'validators': [
            required("Please enter your phone number."),
            match_pattern(PHONE_PATTERN, "Please enter a valid phone number (10-15 digits)."),
        ]},
        'hint': 'Please enter a valid phone number (10-15 digits)',
    },
    5: {
        'id': 5, 'name': 'gender', 'title': 'What is your gender?',
        'subtitle': 'Pick the option that describes you best.',
        'field': {'field': AppSchema.GENDER, 'validators': [
            required_choice("Please select your gender."),
            one_of(genders, "Please select your gender."),
        ]},
    },
    6: {
        'id': 6, 'name': 'country', 'title': 'Which country do you live in?',
        'subtitle': 'We currently accept applicants from these countries.',
        'field': {'field': AppSchema.COUNTRY, 'validators': [
            required_choice("Please select your country."),
            one_of(countries, "Please select your country."),
        ]},
    },
    7: {
        'id': 7, 'name': 'city', 'title': 'Which city do you live in?',
        'subtitle': 'The city or town closest to you.',
        'field': {'field': AppSchema.CITY, 'validators': [required("Please enter your city.")]},
    },
    8: {
        'id': 8, 'name': 'qualification', 'title': 'What is your highest qualification?',
        'subtitle': 'This is the last question. Press Apply to send your application.',
        'field': {'field': AppSchema.QUALIFICATION, 'validators': [
            required_choice("Please select your highest qualification."),
            one_of(qualifications, "Please select your highest qualification."),
        ]},
    },
}

TOTAL_STEPS: int = len(STEPS_BY_ID)
LAST_STEP_ID: int = max(STEPS_BY_ID)


def _check_step_table() -> None:
    """Every schema field gets exactly one step, and step ids run 1..N without gaps."""
    if sorted(STEPS_BY_ID) != list(range(INTRO_STEP_ID, INTRO_STEP_ID + TOTAL_STEPS)):
        raise RuntimeError(f"Step ids must be contiguous from {INTRO_STEP_ID}: {sorted(STEPS_BY_ID)}")
    bound = [s['field']['field'].key for s in STEPS_BY_ID.values() if s['field']]
    expected = [f.key for f in AppSchema.get_all_fields()]
    if bound != expected:
        raise RuntimeError(f"Steps must cover the schema fields once, in order: {bound} != {expected}")

_check_step_table()


def field_key_for_step(step_id: int) -> str | None:
    """The answer-set key bound to a step, or None for the intro."""
    step_def = STEPS_BY_ID.get(step_id)
    if not step_def or not step_def['field']:
        return None
    return step_def['field']['field'].key

def execute_step_validators(step_def: StepDefinition, form_data: dict[str, Any]) -> ValidationResult:
    """Validates the single field bound to a step. Steps without a field always pass."""
    field_conf = step_def['field']
    if not field_conf:
        return True, ""
    return run_validators(form_data.get(field_conf['field'].key), field_conf['validators'], form_data)

def calculate_next_step_id(current_step_id: int) -> int:
    """Calculates the ID of the next step in the sequence."""
    if current_step_id not in STEPS_BY_ID:
        return INTRO_STEP_ID
    return min(current_step_id + 1, LAST_STEP_ID) # Stay on the last step

def calculate_prev_step_id(current_step_id: int) -> int:
    """Calculates the ID of the previous step in the sequence."""
    if current_step_id not in STEPS_BY_ID:
        return INTRO_STEP_ID
    return max(current_step_id - 1, INTRO_STEP_ID)

def calculate_progress(current_step_id: int) -> float:
    """Fraction of the wizard completed: 0.0 on the intro, 1.0 on the last step."""
    return (current_step_id - INTRO_STEP_ID) / (TOTAL_STEPS - 1)
