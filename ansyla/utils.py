# ansyla/utils.py
from __future__ import annotations
from typing import NotRequired, TypedDict
from dataclasses import dataclass

from .para import genders, countries, qualifications
from .validation import ValidatorFunc

# ===================================================================
# 1. CORE DATA STRUCTURES & TYPE ALIASES
# ===================================================================

@dataclass(frozen=True)
class FormField:
    """Defines everything about a form field in one place."""
    key: str
    label: str
    ui_type: str = 'text'
    options: dict[str, str] | None = None
    placeholder: str = ''
    default_value: str = ''

    def display_value(self, value: str) -> str:
        """Returns the human label for an enumerated code, or the raw value."""
        if self.options and value in self.options:
            return self.options[value]
        return value

class FieldConfig(TypedDict):
    field: FormField
    validators: list[ValidatorFunc]

class StepDefinition(TypedDict):
    id: int
    name: str
    title: str
    subtitle: str
    # None for the intro step, which has nothing to validate.
    field: FieldConfig | None
    hint: NotRequired[str]

# ===================================================================
# 2. THE APPLICATION SCHEMA (Single Source of Truth)
# ===================================================================

class AppSchema:
    """
    Defines all fields collected by the application, in submission order.
    Each field is an instance of the FormField dataclass.
    """
    NAME = FormField(key='name', label='Name', placeholder='John Doe')
    EMAIL = FormField(key='email', label='Email', ui_type='email', placeholder='john.doe@example.com')
    PHONE = FormField(key='phone', label='Phone Number', ui_type='tel', placeholder='e.g., 1234567890')
    GENDER = FormField(key='gender', label='Gender', ui_type='select', options=genders,
                       placeholder='Select your gender')
    COUNTRY = FormField(key='country', label='Country', ui_type='select', options=countries,
                        placeholder='Select your country')
    CITY = FormField(key='city', label='City', placeholder='Manchester')
    QUALIFICATION = FormField(key='qualification', label='Highest Qualification', ui_type='select',
                              options=qualifications, placeholder='Select an option')

    @classmethod
    def get_all_fields(cls) -> list[FormField]:
        return [
            field_instance for field_instance in cls.__dict__.values()
            if isinstance(field_instance, FormField)
        ]

# ===================================================================
# 3. CENTRALIZED CONSTANTS
# ===================================================================

APP_TITLE: str = 'Ansyla WFH Application'
THEME_STORAGE_KEY: str = 'darkMode'
SUBMIT_LABEL: str = 'Apply'
SUBMIT_BUSY_LABEL: str = 'Applying...'
