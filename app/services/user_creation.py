# app/services/user_creation.py
import logging

from app.core.metrics import USER_CREATIONS
from app.domain.errors import MissingOperatorsError, OperatorLookupError, PersistenceError, ValidationErrors
from app.domain.models.user_input import CreateUserInput
from app.domain.repositories.operator_repository_interface import IOperatorRepository
from app.domain.repositories.user_repository_interface import IUserRepository
from app.services.operator_normalizer import normalize
from app.services.operator_resolver import resolve_operators
from app.services.user_mapper import to_user
from app.services.user_validator import validate_create_user

logger = logging.getLogger("users")


class UserCreationService:
    """normaliza -> valida -> resolve operadoras -> mapeia -> grava"""

    def __init__(
        self,
        user_repo: IUserRepository,
        operator_repo: IOperatorRepository,
        cpf_required: bool = False,
        description_required: bool = False,
    ):
        self._users = user_repo
        self._operators = operator_repo
        self._cpf_required = cpf_required
        self._description_required = description_required

    def create_user(self, data: CreateUserInput) -> None:
        if data is None:
            raise ValueError("CreateUserInput é obrigatório")

        operator_ids = normalize(data.operator_selection)

        try:
            validated = validate_create_user(
                data,
                operator_ids,
                cpf_required=self._cpf_required,
                description_required=self._description_required,
            )
        except ValidationErrors as e:
            USER_CREATIONS.labels(outcome="invalid").inc()
            logger.info(
                "Cadastro rejeitado na validação: campos=%s",
                sorted(e.field_errors),
                extra={"login": data.login, "outcome": "invalid"},
            )
            raise

        try:
            operators = resolve_operators(validated.operator_ids, self._operators)
        except MissingOperatorsError:
            USER_CREATIONS.labels(outcome="missing_operators").inc()
            raise
        except Exception as e:
            USER_CREATIONS.labels(outcome="lookup_error").inc()
            logger.error(
                "Falha ao consultar operadoras",
                exc_info=True,
                extra={"login": validated.login, "outcome": "lookup_error"},
            )
            raise OperatorLookupError(e) from e

        user = to_user(validated, operators)

        try:
            self._users.save(user)
        except Exception as e:
            USER_CREATIONS.labels(outcome="persistence_error").inc()
            logger.error(
                "Falha ao gravar usuário",
                exc_info=True,
                extra={"login": user.login, "outcome": "persistence_error"},
            )
            raise PersistenceError(e) from e

        USER_CREATIONS.labels(outcome="created").inc()
        logger.info(
            "Usuário criado",
            extra={"login": user.login, "outcome": "created", "operator_count": len(user.operators)},
        )
