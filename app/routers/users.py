# app/routers/users.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..domain.errors import (
    LoginAlreadyExistsError,
    MissingOperatorsError,
    OperatorLookupError,
    PersistenceError,
    ValidationErrors,
)
from ..domain.repositories.operator_repository_interface import IOperatorRepository
from ..domain.repositories.user_repository_interface import IUserRepository
from ..infrastructure.repositories.operator_repo import OperatorRepo
from ..infrastructure.repositories.user_repo import UserRepo
from ..models import (
    CreateUserRequest,
    CreateUserResponse,
    LoginExistsResponse,
    MissingOperatorsDetail,
    ValidationErrorDetail,
)
from ..services.user_creation import UserCreationService

router = APIRouter(
    prefix="/users",
    tags=["users"],
)

logger = logging.getLogger("users")


def get_user_repo() -> IUserRepository:
    return UserRepo()


def get_operator_repo() -> IOperatorRepository:
    return OperatorRepo()


@router.post("", response_model=CreateUserResponse, status_code=201)
def create_user(
    payload: CreateUserRequest,
    user_repo: IUserRepository = Depends(get_user_repo),
    operator_repo: IOperatorRepository = Depends(get_operator_repo),
) -> CreateUserResponse:
    service = UserCreationService(
        user_repo,
        operator_repo,
        cpf_required=settings.user_cpf_required,
        description_required=settings.user_description_required,
    )
    try:
        service.create_user(payload.to_input())
    except ValidationErrors as e:
        detail = ValidationErrorDetail(
            message="Dados do usuário inválidos",
            field_errors=e.field_errors,
            object_errors=e.object_errors,
        )
        raise HTTPException(status_code=400, detail=detail.model_dump())
    except MissingOperatorsError as e:
        detail = MissingOperatorsDetail(
            message="Operadoras inexistentes",
            missing_operator_ids=e.ids,
        )
        raise HTTPException(status_code=400, detail=detail.model_dump())
    except OperatorLookupError:
        raise HTTPException(status_code=503, detail="Consulta de operadoras indisponível")
    except PersistenceError as e:
        if isinstance(e.cause, LoginAlreadyExistsError):
            raise HTTPException(status_code=409, detail="Login já cadastrado")
        # não repassa detalhes do banco para o cliente
        raise HTTPException(status_code=500, detail="Erro ao persistir dados do usuário")

    return CreateUserResponse(message="Usuário criado com sucesso")


@router.get("/exists/{login}", response_model=LoginExistsResponse)
def login_exists(
    login: str,
    user_repo: IUserRepository = Depends(get_user_repo),
) -> LoginExistsResponse:
    login = login.strip()
    if not login:
        raise HTTPException(status_code=400, detail="login é obrigatório")
    return LoginExistsResponse(login=login, exists=user_repo.exists_by_login(login))
