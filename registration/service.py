import logging
from typing import Any, Dict, Optional, Union

from persistence.crypto import ScryptPasswordHasher
from persistence.user_store import UserStore
from registration.graph import RegistrationGraphFactory
from registration.state import (
    GENERIC_FAILURE,
    Outcome,
    PartialFieldFailure,
    PersistenceFailure,
    RegistrationInput,
    RegistrationState,
    Success,
    ValidationResult,
)
from registration.validator import RegistrationValidator


class RegistrationService:
    """
    Validates a submitted form and, when every field passes, stores the user
    with a hashed password. Each call is independent; the only shared state
    is the store itself.
    """

    def __init__(
        self,
        validator: RegistrationValidator,
        store: UserStore,
        hasher: ScryptPasswordHasher,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.graph = RegistrationGraphFactory(
            validator, store, hasher, self.logger
        ).compile()

    def register(self, form: RegistrationInput) -> Outcome:
        self.logger.info("Form submitted")

        out: Union[Dict[str, Any], RegistrationState] = self.graph.invoke(
            form.trimmed().model_dump()
        )
        state = out if isinstance(out, RegistrationState) else RegistrationState.model_validate(out)

        result = ValidationResult(field_errors=state.field_errors)
        if not result.is_valid:
            self.logger.info("Form validation failed")
            return PartialFieldFailure(result=result)

        if state.record is None:
            return PersistenceFailure(reason=GENERIC_FAILURE)

        return Success(record=state.record)


def register(
    form: RegistrationInput,
    validator: RegistrationValidator,
    store: UserStore,
    hasher: ScryptPasswordHasher,
    logger: Optional[logging.Logger] = None,
) -> Outcome:
    return RegistrationService(validator, store, hasher, logger).register(form)
