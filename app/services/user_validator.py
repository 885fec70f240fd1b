# app/services/user_validator.py
from typing import Dict, List, Optional, Sequence

from app.domain.errors import ValidationErrors
from app.domain.models.user import UserStatus
from app.domain.models.user_input import CreateUserInput, ValidatedUserInput

LOGIN_MAX_LENGTH = 50
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 255
CPF_LENGTH = 11

OPERATOR_OR_MOBILE_REQUIRED = "Informe ao menos uma operadora ou habilite o sistema mobile"

_ACTIVE_VALUES = {"active", "a", "ativo"}


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_status(status: Optional[str], active: Optional[bool] = None) -> UserStatus:
    """
    Status explícito tem prioridade e aceita inglês ou português (Active/Ativo/A,
    Inactive/Inativo/I); qualquer valor não reconhecido vira Inactive
    (o legado gravava 'I' para tudo que não fosse 'A').
    Sem status, vale o booleano `active`; sem nenhum dos dois, Active.
    """
    status = _clean(status)
    if status is not None:
        if status.lower() in _ACTIVE_VALUES:
            return UserStatus.ACTIVE
        return UserStatus.INACTIVE
    if active is not None:
        return UserStatus.ACTIVE if active else UserStatus.INACTIVE
    return UserStatus.ACTIVE


def _check_text(errors: Dict[str, str], field: str, value: Optional[str], max_length: int, required: bool = True):
    if value is None:
        if required:
            errors[field] = f"{field} é obrigatório"
        return
    if len(value) > max_length:
        errors[field] = f"{field} deve ter no máximo {max_length} caracteres"


def _check_cpf(errors: Dict[str, str], cpf: Optional[str], required: bool):
    if cpf is None:
        if required:
            errors["cpf"] = "cpf é obrigatório"
        return
    if len(cpf) != CPF_LENGTH or not cpf.isascii() or not cpf.isdigit():
        errors["cpf"] = f"cpf deve conter exatamente {CPF_LENGTH} dígitos"


def check_operator_or_mobile(operator_ids: Sequence[int], mobile_system: bool) -> Optional[str]:
    """Regra de negócio: usuário precisa de ao menos uma operadora ou do sistema mobile."""
    if operator_ids or mobile_system is True:
        return None
    return OPERATOR_OR_MOBILE_REQUIRED


def validate_create_user(
    data: CreateUserInput,
    operator_ids: Sequence[int],
    *,
    cpf_required: bool = False,
    description_required: bool = False,
) -> ValidatedUserInput:
    """
    Avalia todas as regras e levanta ValidationErrors com o conjunto completo
    de violações; não para no primeiro erro.
    """
    field_errors: Dict[str, str] = {}
    object_errors: List[str] = []

    login = _clean(data.login)
    name = _clean(data.name)
    description = _clean(data.description)
    cpf = _clean(data.cpf)

    _check_text(field_errors, "login", login, LOGIN_MAX_LENGTH)
    _check_text(field_errors, "name", name, NAME_MAX_LENGTH)
    _check_text(field_errors, "description", description, DESCRIPTION_MAX_LENGTH, required=description_required)
    _check_cpf(field_errors, cpf, cpf_required)

    cross = check_operator_or_mobile(operator_ids, data.mobile_system)
    if cross:
        object_errors.append(cross)

    if field_errors or object_errors:
        raise ValidationErrors(field_errors, object_errors)

    return ValidatedUserInput(
        login=login,
        name=name,
        description=description,
        cpf=cpf,
        status=resolve_status(data.status, data.active),
        operator_ids=list(operator_ids),
        mobile_system=data.mobile_system,
    )
