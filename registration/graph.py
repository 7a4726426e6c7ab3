import logging
from typing import Any, Dict, Literal

from langgraph.graph import StateGraph, START, END

from persistence.crypto import ScryptPasswordHasher
from persistence.user_store import StoreError, UserStore
from registration.state import RegistrationState, UserRecord, ValidationResult
from registration.validator import RegistrationValidator


class RegistrationGraphFactory:
    def __init__(
        self,
        validator: RegistrationValidator,
        store: UserStore,
        hasher: ScryptPasswordHasher,
        logger: logging.Logger,
    ):
        self.validator = validator
        self.store = store
        self.hasher = hasher
        self.logger = logger

    def validate_node(self, state: RegistrationState) -> Dict[str, Any]:
        result = self.validator.validate(state.form())

        for field, message in result.errors.items():
            self.logger.error("%s validation failed: %s", field.capitalize(), message)

        if result.only_other_fields_invalid:
            self.logger.info("Email and password are valid, but other fields are not")

        return {"field_errors": result.field_errors}

    @staticmethod
    def should_store(state: RegistrationState) -> Literal["end", "store"]:
        result = ValidationResult(field_errors=state.field_errors)
        return "store" if result.is_valid else "end"

    def store_node(self, state: RegistrationState) -> Dict[str, Any]:
        """
        Hashes the password and inserts the record. Store failures end up in
        failure_detail instead of escaping the graph.
        """
        self.logger.info("All validations passed, attempting to store data")

        record = UserRecord(
            name=state.name,
            email=state.email,
            password_hash=self.hasher.hash(state.password),
            aadhar=state.aadhar,
            mobile=state.mobile,
            address=state.address,
        )

        try:
            self.store.insert(record)
        except StoreError as exc:
            self.logger.error("Database error: %s", exc)
            return {"failure_detail": str(exc)}

        self.logger.info("User registered successfully: %s", record.email)
        return {"record": record}

    def build(self) -> StateGraph:
        g = StateGraph(RegistrationState)

        g.add_node("validate", self.validate_node)
        g.add_node("store", self.store_node)

        g.add_edge(START, "validate")
        g.add_conditional_edges(
            "validate",
            self.should_store,
            {"end": END, "store": "store"},
        )
        g.add_edge("store", END)

        return g

    def compile(self):
        return self.build().compile()
