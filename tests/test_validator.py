# tests/test_validator.py

import pytest

from registration.graph import RegistrationGraphFactory
from registration.state import RegistrationInput, RegistrationState, ValidationResult
from registration.validator import RegistrationValidator

VALID = {
    "name": "Jane Doe",
    "email": "jane@gmail.com",
    "password": "Abcdef1!",
    "aadhar": "123456789012",
    "mobile": "9876543210",
    "address": "123 Main Street",
}


def make_form(**overrides):
    return RegistrationInput(**{**VALID, **overrides})


@pytest.fixture
def validator():
    return RegistrationValidator()


def test_all_valid_fields(validator):
    result = validator.validate(make_form())

    assert result.is_valid
    assert result.errors == {}
    assert set(result.field_errors) == set(VALID)


@pytest.mark.parametrize(
    "field,message",
    [
        ("name", "Name is required"),
        ("email", "Email is required"),
        ("password", "Password is required"),
        ("aadhar", "Aadhar number is required"),
        ("mobile", "Mobile number is required"),
        ("address", "Address is required"),
    ],
)
def test_missing_field_reports_required(validator, field, message):
    result = validator.validate(make_form(**{field: ""}))

    assert not result.is_valid
    assert result.errors == {field: message}


def test_all_fields_checked_without_short_circuit(validator):
    result = validator.validate(RegistrationInput())

    assert len(result.errors) == 6


def test_validate_is_idempotent(validator):
    form = make_form(email="jane@yahoo.com", mobile="123")

    assert validator.validate(form) == validator.validate(form)


def test_name_rejects_digits(validator):
    result = validator.validate(make_form(name="Jane 2"))

    assert result.error_for("name") == "Only letters and spaces allowed"


@pytest.mark.parametrize(
    "email,message",
    [
        ("user@yahoo.com", "Only Gmail addresses are allowed"),
        ("not-an-email", "Invalid email format"),
        ("jané@gmail.com", "Invalid email format"),
        ("user@gmail.com", None),
    ],
)
def test_email_rules(validator, email, message):
    assert validator.validate(make_form(email=email)).error_for("email") == message


@pytest.mark.parametrize(
    "password,message",
    [
        ("Ab1!", "Password must be at least 8 characters"),
        ("abcdefg1!", "Password must contain an uppercase letter"),
        ("ABCDEFG1!", "Password must contain a lowercase letter"),
        ("Abcdefgh!", "Password must contain a number"),
        ("Abcdefgh1", "Password must contain a special character"),
        ("Abcdef1!", None),
    ],
)
def test_password_rule_precedence(validator, password, message):
    assert validator.validate(make_form(password=password)).error_for("password") == message


def test_short_password_reports_length_before_character_classes(validator):
    # fails every rule after length too
    assert validator.validate(make_form(password="a")).error_for("password") == (
        "Password must be at least 8 characters"
    )


def test_password_is_judged_untrimmed(validator):
    # 9 characters including the leading space
    assert validator.validate(make_form(password=" Abc123!@")).error_for("password") is None
    # 8 characters with the space, 7 without
    assert validator.validate(make_form(password=" Abc12!@")).error_for("password") is None


@pytest.mark.parametrize(
    "aadhar,message",
    [
        ("12345678901", "Aadhar must be exactly 12 digits"),
        ("1234567890123", "Aadhar must be exactly 12 digits"),
        ("12345678901a", "Aadhar must be exactly 12 digits"),
        ("123456789012", None),
    ],
)
def test_aadhar_rules(validator, aadhar, message):
    assert validator.validate(make_form(aadhar=aadhar)).error_for("aadhar") == message


@pytest.mark.parametrize(
    "mobile,message",
    [
        ("5123456789", "Mobile must be 10 digits starting with 6-9"),
        ("912345678", "Mobile must be 10 digits starting with 6-9"),
        ("9123456789", None),
        ("6000000000", None),
    ],
)
def test_mobile_rules(validator, mobile, message):
    assert validator.validate(make_form(mobile=mobile)).error_for("mobile") == message


def test_short_address(validator):
    result = validator.validate(make_form(address="Main St"))

    assert result.error_for("address") == (
        "Please enter a complete address (at least 10 characters)"
    )


def test_email_and_password_valid_signal(validator):
    result = validator.validate(make_form(name="J4ne", mobile="1"))

    assert result.email_and_password_valid
    assert result.only_other_fields_invalid
    assert not result.is_valid


def test_signal_false_when_email_invalid(validator):
    result = validator.validate(make_form(email="jane@yahoo.com"))

    assert not result.email_and_password_valid
    assert not result.only_other_fields_invalid


def test_signal_false_when_everything_valid(validator):
    assert not validator.validate(make_form()).only_other_fields_invalid


def test_trimmed_keeps_password():
    form = make_form(name="  Jane Doe ", password=" Abc123!@ ")

    trimmed = form.trimmed()

    assert trimmed.name == "Jane Doe"
    assert trimmed.password == " Abc123!@ "


def test_result_missing_fields_is_not_valid():
    assert not ValidationResult().is_valid
    assert not ValidationResult(field_errors={"name": None, "email": None}).is_valid


def test_state_without_field_errors_does_not_route_to_store():
    assert RegistrationGraphFactory.should_store(RegistrationState()) == "end"
