"""Tests for the domain error taxonomy and validation error trees."""

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.hrdesk.core.errors import (
    ConflictError,
    HRDeskError,
    InvalidArgumentError,
    NotFoundError,
    PersistenceError,
    ValidationFailedError,
    error_tree,
)
from src.hrdesk.core.exceptions import status_code_for
from src.hrdesk.managers.base import validate_payload
from src.hrdesk.schemas.company import CompanyCreate
from src.hrdesk.schemas.person import PersonCreate

pytestmark = pytest.mark.unit


def test_domain_errors_share_base_class():
    for error_type in (InvalidArgumentError, NotFoundError, ConflictError):
        assert issubclass(error_type, HRDeskError)
    assert issubclass(ValidationFailedError, HRDeskError)


def test_persistence_error_is_sqlalchemy_error():
    assert PersistenceError is SQLAlchemyError


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidArgumentError("bad"), 400),
        (NotFoundError("missing"), 404),
        (ConflictError("clash"), 409),
        (ValidationFailedError({}), 422),
    ],
)
def test_status_code_for(error, status_code):
    assert status_code_for(error) == status_code


def test_nested_errors_by_index():
    with pytest.raises(ValidationError) as exc_info:
        CompanyCreate.model_validate(
            {"name": "Acme", "bases": [{"name": "HQ"}, {"address": "Via Roma 1"}]}
        )

    errors = ValidationFailedError.from_pydantic(exc_info.value).errors

    assert errors == {"bases": {1: {"name": ["Field required"]}}}


def test_multiple_field_errors():
    with pytest.raises(ValidationError) as exc_info:
        CompanyCreate.model_validate({"name": "  ", "iva_code": "12AB"})

    errors = ValidationFailedError.from_pydantic(exc_info.value).errors

    assert set(errors) == {"name", "iva_code"}
    assert all(isinstance(messages, list) for messages in errors.values())


def test_error_tree_root_errors():
    tree = error_tree([{"loc": (), "msg": "Input should be a valid dictionary"}])

    assert tree == {"__root__": ["Input should be a valid dictionary"]}


def test_validate_payload_passes_instances_through():
    payload = PersonCreate(name="Ada")

    assert validate_payload(PersonCreate, payload) is payload


def test_validate_payload_from_mapping():
    model = validate_payload(PersonCreate, {"name": " Ada ", "email": "ada@example.com"})

    assert model.name == "Ada"


def test_validate_payload_raises_validation_failed():
    with pytest.raises(ValidationFailedError) as exc_info:
        validate_payload(PersonCreate, {"name": "Ada", "email": "not-an-email"})

    assert "email" in exc_info.value.errors
