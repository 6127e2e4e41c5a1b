from __future__ import annotations
from typing import Any, TypedDict, cast

from .utils import AppSchema

# ===================================================================
# 1. THE ANSWER SET - WHAT THE APPLICANT FILLS IN
# ===================================================================
# Every value is plain text. gender/country/qualification hold option
# codes (see para.py), never display labels.

class AnswerSet(TypedDict):
    """The accumulated answers of one wizard session."""
    name: str
    email: str
    phone: str
    gender: str
    country: str
    city: str
    qualification: str

# Submission order, derived from the schema so the two never drift apart.
ANSWER_FIELDS: tuple[str, ...] = tuple(f.key for f in AppSchema.get_all_fields())

# ===================================================================
# 2. BUILDERS
# ===================================================================

def empty_answer_set() -> AnswerSet:
    """A fresh answer set with every field at its schema default."""
    return cast(AnswerSet, {f.key: f.default_value for f in AppSchema.get_all_fields()})

def build_submission_payload(answers: AnswerSet | dict[str, Any]) -> dict[str, str]:
    """
    The JSON body sent to the webhook: the answer set verbatim, with
    exactly the known keys in schema order.
    """
    return {key: str(answers.get(key, '')) for key in ANSWER_FIELDS}
