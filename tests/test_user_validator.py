import pytest

from app.domain.errors import ValidationErrors
from app.domain.models.user import UserStatus
from app.domain.models.user_input import CreateUserInput
from app.services.user_validator import (
    OPERATOR_OR_MOBILE_REQUIRED,
    resolve_status,
    validate_create_user,
)


def _input(**overrides) -> CreateUserInput:
    base = {"login": "jdoe", "name": "John Doe"}
    base.update(overrides)
    return CreateUserInput(**base)


def test_valid_input_is_trimmed():
    v = validate_create_user(_input(login="  jdoe ", name=" John Doe ", description="  "), [1])
    assert v.login == "jdoe"
    assert v.name == "John Doe"
    assert v.description is None
    assert v.status == UserStatus.ACTIVE
    assert v.operator_ids == [1]


def test_collects_every_violation_in_one_pass():
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(login=" ", name=None, cpf="123"), [])
    err = exc.value
    assert set(err.field_errors) == {"login", "name", "cpf"}
    assert err.object_errors == [OPERATOR_OR_MOBILE_REQUIRED]


def test_empty_operators_without_mobile_fails_object_rule():
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(mobile_system=False), [])
    assert exc.value.field_errors == {}
    assert exc.value.object_errors == [OPERATOR_OR_MOBILE_REQUIRED]


def test_mobile_system_satisfies_rule_without_operators():
    v = validate_create_user(_input(mobile_system=True), [])
    assert v.operator_ids == []
    assert v.mobile_system is True


def test_length_limits():
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(login="x" * 51, name="n" * 101, description="d" * 256), [1])
    assert set(exc.value.field_errors) == {"login", "name", "description"}


def test_cpf_required_by_configuration():
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(), [1], cpf_required=True)
    assert "cpf" in exc.value.field_errors

    v = validate_create_user(_input(cpf=" 12345678901 "), [1], cpf_required=True)
    assert v.cpf == "12345678901"


@pytest.mark.parametrize("cpf", ["123.456.789-01", "1234567890", "123456789012", "1234567890a"])
def test_cpf_must_be_eleven_digits_when_given(cpf):
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(cpf=cpf), [1])
    assert list(exc.value.field_errors) == ["cpf"]


def test_description_required_by_configuration():
    with pytest.raises(ValidationErrors) as exc:
        validate_create_user(_input(), [1], description_required=True)
    assert list(exc.value.field_errors) == ["description"]


@pytest.mark.parametrize(
    "status,active,expected",
    [
        (None, None, UserStatus.ACTIVE),
        ("Active", None, UserStatus.ACTIVE),
        ("ACTIVE", None, UserStatus.ACTIVE),
        (" a ", None, UserStatus.ACTIVE),
        ("inactive", None, UserStatus.INACTIVE),
        ("I", None, UserStatus.INACTIVE),
        ("Ativo", None, UserStatus.ACTIVE),
        ("ATIVO", None, UserStatus.ACTIVE),
        ("Inativo", None, UserStatus.INACTIVE),
        ("whatever", None, UserStatus.INACTIVE),
        ("", False, UserStatus.INACTIVE),
        (None, True, UserStatus.ACTIVE),
        ("inactive", True, UserStatus.INACTIVE),
    ],
)
def test_resolve_status(status, active, expected):
    assert resolve_status(status, active) == expected


def test_unknown_status_is_not_an_error():
    v = validate_create_user(_input(status="bloqueado"), [1])
    assert v.status == UserStatus.INACTIVE
