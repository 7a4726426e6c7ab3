import re
from typing import Callable, Dict, List, NamedTuple, Optional

from email_validator import EmailNotValidError, validate_email

from registration.state import FIELDS, RegistrationInput, ValidationResult

SPECIAL_CHARACTERS = set('!@#$%^&*(),.?":{}|<>')
GMAIL_SUFFIX = "@gmail.com"


class FieldRule(NamedTuple):
    passes: Callable[[str], bool]
    message: str


def _not_empty(value: str) -> bool:
    return value != ""


def _well_formed_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


def _matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda value: compiled.fullmatch(value) is not None


def _contains(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda value: compiled.search(value) is not None


# first failing rule wins
FIELD_RULES: Dict[str, List[FieldRule]] = {
    "name": [
        FieldRule(_not_empty, "Name is required"),
        FieldRule(_matches(r"[a-zA-Z ]+"), "Only letters and spaces allowed"),
    ],
    "email": [
        FieldRule(_not_empty, "Email is required"),
        FieldRule(_well_formed_email, "Invalid email format"),
        FieldRule(lambda v: v.endswith(GMAIL_SUFFIX), "Only Gmail addresses are allowed"),
    ],
    "password": [
        FieldRule(_not_empty, "Password is required"),
        FieldRule(lambda v: len(v) >= 8, "Password must be at least 8 characters"),
        FieldRule(_contains(r"[A-Z]"), "Password must contain an uppercase letter"),
        FieldRule(_contains(r"[a-z]"), "Password must contain a lowercase letter"),
        FieldRule(_contains(r"[0-9]"), "Password must contain a number"),
        FieldRule(
            lambda v: any(c in SPECIAL_CHARACTERS for c in v),
            "Password must contain a special character",
        ),
    ],
    "aadhar": [
        FieldRule(_not_empty, "Aadhar number is required"),
        FieldRule(_matches(r"[0-9]{12}"), "Aadhar must be exactly 12 digits"),
    ],
    "mobile": [
        FieldRule(_not_empty, "Mobile number is required"),
        FieldRule(_matches(r"[6-9][0-9]{9}"), "Mobile must be 10 digits starting with 6-9"),
    ],
    "address": [
        FieldRule(_not_empty, "Address is required"),
        FieldRule(
            lambda v: len(v) >= 10,
            "Please enter a complete address (at least 10 characters)",
        ),
    ],
}


class RegistrationValidator:
    def __init__(self, rules: Optional[Dict[str, List[FieldRule]]] = None):
        self.rules = rules or FIELD_RULES

    def check_field(self, field: str, value: str) -> Optional[str]:
        for rule in self.rules.get(field, []):
            if not rule.passes(value):
                return rule.message
        return None

    def validate(self, form: RegistrationInput) -> ValidationResult:
        """
        Checks every field independently. Values are taken as given; callers
        trim them beforehand.
        """
        errors: Dict[str, Optional[str]] = {
            field: self.check_field(field, getattr(form, field)) for field in FIELDS
        }
        return ValidationResult(field_errors=errors)
