from typing import Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field

FIELDS = ("name", "email", "password", "aadhar", "mobile", "address")

GENERIC_FAILURE = "Something went wrong. Please try again later."


class RegistrationInput(BaseModel):
    name: str = Field(default="", description="User's full name")
    email: str = Field(default="", description="Gmail address")
    password: str = Field(default="", description="Plaintext password, never trimmed")
    aadhar: str = Field(default="", description="12 digit Aadhar number")
    mobile: str = Field(default="", description="10 digit mobile number")
    address: str = Field(default="", description="Postal address")

    def trimmed(self) -> "RegistrationInput":
        """
        Copy with surrounding whitespace removed from every field except the
        password, where spaces may be intentional.
        """
        return self.model_copy(
            update={
                field: getattr(self, field).strip()
                for field in FIELDS
                if field != "password"
            }
        )


class ValidationResult(BaseModel):
    field_errors: Dict[str, Optional[str]] = Field(default_factory=dict)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return all(
            field in self.field_errors and self.field_errors[field] is None
            for field in FIELDS
        )

    @property
    def errors(self) -> Dict[str, str]:
        return {k: v for k, v in self.field_errors.items() if v is not None}

    def error_for(self, field: str) -> Optional[str]:
        return self.field_errors.get(field)

    @property
    def email_and_password_valid(self) -> bool:
        return self.error_for("email") is None and self.error_for("password") is None

    @property
    def only_other_fields_invalid(self) -> bool:
        return self.email_and_password_valid and not self.is_valid


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password_hash: str
    aadhar: str
    mobile: str
    address: str

    def as_row(self) -> tuple:
        # column order of the users table
        return (
            self.name,
            self.email,
            self.password_hash,
            self.aadhar,
            self.mobile,
            self.address,
        )


class RegistrationState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = ""
    email: str = ""
    password: str = ""
    aadhar: str = ""
    mobile: str = ""
    address: str = ""

    field_errors: Dict[str, Optional[str]] = Field(default_factory=dict)
    record: Optional[UserRecord] = None
    failure_detail: Optional[str] = None

    def form(self) -> RegistrationInput:
        return RegistrationInput(**{field: getattr(self, field) for field in FIELDS})


class Success(BaseModel):
    kind: Literal["success"] = "success"
    record: UserRecord


class PartialFieldFailure(BaseModel):
    kind: Literal["partial_field_failure"] = "partial_field_failure"
    result: ValidationResult


class PersistenceFailure(BaseModel):
    kind: Literal["persistence_failure"] = "persistence_failure"
    reason: str = GENERIC_FAILURE


Outcome = Union[Success, PartialFieldFailure, PersistenceFailure]
