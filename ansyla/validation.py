# validation.py
from __future__ import annotations
import re
from re import Pattern
from typing import Any
from collections.abc import Callable, Collection

# --- Type Aliases ---
ValidationResult = tuple[bool, str]
# A validator gets the value and the whole answer set for context
ValidatorFunc = Callable[[Any | None, dict[str, Any]], ValidationResult]

# --- Regex Patterns (centralized) ---
EMAIL_PATTERN: Pattern[str] = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+\Z")
PHONE_PATTERN: Pattern[str] = re.compile(r'^[0-9]{10,15}\Z')

# ===================================================================
# GENERIC VALIDATOR GENERATORS
# ===================================================================

def required(message: str = "This field is required.") -> ValidatorFunc:
    """Ensures a value is not None, not an empty string, and not just whitespace."""
    def validator(value: Any | None, form_data: dict[str, Any]) -> ValidationResult:
        if value is None:
            return False, message
        if isinstance(value, str) and not value.strip():
            return False, message
        return True, ""
    return validator

def required_choice(message: str = "Please make a selection.") -> ValidatorFunc:
    """Ensures a value from a select control is not None or empty."""
    def validator(value: Any | None, form_data: dict[str, Any]) -> ValidationResult:
        if value is None or (isinstance(value, str) and not value.strip()):
            return False, message
        return True, ""
    return validator

def one_of(choices: Collection[str], message: str) -> ValidatorFunc:
    """Ensures a selected code belongs to the enumerated choices."""
    def validator(value: Any | None, form_data: dict[str, Any]) -> ValidationResult:
        # Empty is `required_choice`'s job.
        if not value:
            return True, ""
        if value not in choices:
            return False, message
        return True, ""
    return validator

def match_pattern(pattern: Pattern[str], message: str) -> ValidatorFunc:
    """Ensures a string value matches a regex pattern."""
    def validator(value: Any | None, form_data: dict[str, Any]) -> ValidationResult:
        # Only runs on non-empty values; chain it with required().
        if not value or not isinstance(value, str):
            return True, ""
        # Matched as stored: the value is submitted verbatim.
        if not pattern.match(value):
            return False, message
        return True, ""
    return validator

def run_validators(value: Any | None, validators: list[ValidatorFunc], form_data: dict[str, Any]) -> ValidationResult:
    """Runs validators in order and stops at the first failure."""
    for validator_func in validators:
        is_valid, msg = validator_func(value, form_data)
        if not is_valid:
            return False, msg
    return True, ""
