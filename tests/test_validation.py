# tests/test_validation.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

# This is a standard way to make the `ansyla` directory importable
# without having to install the project in editable mode.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ansyla.validation import (
    required,
    required_choice,
    one_of,
    match_pattern,
    run_validators,
    EMAIL_PATTERN,
    PHONE_PATTERN,
)

# Test data is just a dummy dict for context, as our validators require it.
FORM_DATA: dict[str, Any] = {}

def test_required_validator() -> None:
    """Tests the `required` validator for various empty/non-empty cases."""
    validator = required("This field is required.")

    # --- Failing Cases ---
    is_valid_none, msg = validator(None, FORM_DATA)
    assert not is_valid_none, "Should fail for None"
    assert msg == "This field is required."

    is_valid_empty_str, _ = validator("", FORM_DATA)
    assert not is_valid_empty_str, "Should fail for empty string"

    is_valid_whitespace, _ = validator("   ", FORM_DATA)
    assert not is_valid_whitespace, "Should fail for whitespace-only string"

    # --- Passing Cases ---
    is_valid_str, msg = validator("John Doe", FORM_DATA)
    assert is_valid_str, "Should pass for a valid string"
    assert msg == ""


def test_required_choice_validator() -> None:
    """Tests that an unselected dropdown fails."""
    validator = required_choice("Please select your gender.")

    assert validator("", FORM_DATA) == (False, "Please select your gender.")
    assert validator(None, FORM_DATA) == (False, "Please select your gender.")
    assert validator("male", FORM_DATA) == (True, "")


def test_one_of_validator() -> None:
    """Tests that only enumerated codes are accepted."""
    validator = one_of({'ghana': 'Ghana', 'kenya': 'Kenya'}, "Please select your country.")

    # --- Passing Cases ---
    assert validator("ghana", FORM_DATA)[0], "Should pass for a known code"

    # --- Failing Cases ---
    assert not validator("Ghana", FORM_DATA)[0], "Should fail for a display label instead of a code"
    assert not validator("france", FORM_DATA)[0], "Should fail for an unknown code"

    # --- Edge Cases ---
    assert validator("", FORM_DATA)[0], "Should pass for an empty string (not its responsibility)"


def test_match_pattern_validator() -> None:
    """Tests the `match_pattern` validator with the phone number pattern."""
    validator = match_pattern(PHONE_PATTERN, "Invalid phone number.")

    # --- Passing Cases ---
    is_valid_phone, _ = validator("1234567890", FORM_DATA)
    assert is_valid_phone, "Should pass for a 10-digit phone number"

    is_valid_long, _ = validator("123456789012345", FORM_DATA)
    assert is_valid_long, "Should pass for a 15-digit phone number"

    # --- Failing Cases ---
    is_valid_short, _ = validator("123456789", FORM_DATA)
    assert not is_valid_short, "Should fail for a 9-digit number"

    is_valid_too_long, _ = validator("1234567890123456", FORM_DATA)
    assert not is_valid_too_long, "Should fail for a 16-digit number"

    is_valid_chars, msg = validator("12a4567890", FORM_DATA)
    assert not is_valid_chars, "Should fail for a number with letters"
    assert msg == "Invalid phone number."

    is_valid_plus, _ = validator("+233123456789", FORM_DATA)
    assert not is_valid_plus, "Should fail for a leading plus sign"

    # --- Edge Cases ---
    # `match_pattern` should ignore empty values; that's `required`'s job.
    is_valid_empty, _ = validator("", FORM_DATA)
    assert is_valid_empty, "Should pass for an empty string (not its responsibility)"

    is_valid_none, _ = validator(None, FORM_DATA)
    assert is_valid_none, "Should pass for None (not its responsibility)"


def test_email_pattern() -> None:
    """Tests the email pattern needs a local part, an @ and a dotted domain."""
    validator = match_pattern(EMAIL_PATTERN, "Invalid email.")

    for good in ("john@x.com", "a@b.co", "john.doe+wfh@example.co.uk"):
        assert validator(good, FORM_DATA)[0], f"Should pass for {good}"

    for bad in ("not-an-email", "john@localhost", "@example.com", "john@", "john doe@example.com"):
        assert not validator(bad, FORM_DATA)[0], f"Should fail for {bad}"


def test_run_validators_stops_at_first_failure() -> None:
    """The first failing validator's message wins."""
    chain = [required("Please enter your email address."), match_pattern(EMAIL_PATTERN, "Please enter a valid email address.")]

    assert run_validators("", chain, FORM_DATA) == (False, "Please enter your email address.")
    assert run_validators("nope", chain, FORM_DATA) == (False, "Please enter a valid email address.")
    assert run_validators("a@b.co", chain, FORM_DATA) == (True, "")


def test_match_pattern_rejects_surrounding_whitespace() -> None:
    """Values are matched as stored, since they are submitted verbatim."""
    phone = match_pattern(PHONE_PATTERN, "Invalid phone number.")
    email = match_pattern(EMAIL_PATTERN, "Invalid email.")

    assert not phone(" 1234567890 ", FORM_DATA)[0], "Should fail for a padded phone number"
    assert not phone("1234567890\n", FORM_DATA)[0], "Should fail for a trailing newline"
    assert not email(" john@x.com ", FORM_DATA)[0], "Should fail for a padded email"
