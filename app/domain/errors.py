# app/domain/errors.py
from typing import Dict, Iterable, List, Optional


class UserCreationError(Exception):
    """Base dos erros recuperáveis do fluxo de criação de usuário."""


class ValidationErrors(UserCreationError):
    def __init__(self, field_errors: Optional[Dict[str, str]] = None, object_errors: Optional[List[str]] = None):
        self.field_errors: Dict[str, str] = dict(field_errors or {})
        self.object_errors: List[str] = list(object_errors or [])
        super().__init__("Dados do usuário inválidos")


class MissingOperatorsError(UserCreationError):
    def __init__(self, ids: Iterable[int]):
        self.ids: List[int] = list(ids)
        super().__init__(f"Operadoras inexistentes: {self.ids}")


class PersistenceError(UserCreationError):
    """Falha ao gravar o usuário. A causa fica em `cause` e não é exposta na mensagem."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__("Erro ao persistir dados do usuário")


class OperatorLookupError(UserCreationError):
    """Falha ao consultar operadoras (banco fora do ar, throttling). A causa fica em `cause`."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__("Erro ao consultar operadoras")


class LoginAlreadyExistsError(Exception):
    """Levantada pelo repositório quando o login já está cadastrado."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"Login já cadastrado: {login}")
