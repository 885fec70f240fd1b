# app/infrastructure/repositories/user_repo.py
from datetime import datetime, timezone

from botocore.exceptions import ClientError

from app.domain.errors import LoginAlreadyExistsError
from app.domain.models.user import User
from app.domain.repositories.user_repository_interface import IUserRepository
import app.aws as aws_mod   # <-- importe o módulo, não o símbolo

from app.core.metrics import DDB_OPS
from app.utils.id_gen import new_id


def _to_item(user: User) -> dict:
    item = {
        "login": user.login,
        "id": user.id,
        "name": user.name,
        "cpf": user.cpf,
        "status": user.status.value,
        "description": user.description,
        "operator_ids": user.operator_ids,
        "mobile_system": user.mobile_system,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }
    # DynamoDB não precisa guardar atributos vazios
    return {k: v for k, v in item.items() if v is not None}


class UserRepo(IUserRepository):
    """Tabela de usuários com chave de partição `login` (único)."""

    def save(self, user: User) -> User:
        persisted = user.model_copy(
            update={"id": new_id(), "created_at": datetime.now(timezone.utc)}
        )
        try:
            aws_mod.table_users.put_item(
                Item=_to_item(persisted),
                ConditionExpression="attribute_not_exists(login)",
            )
            DDB_OPS.labels(op="put", status="ok").inc()
        except ClientError as e:
            DDB_OPS.labels(op="put", status="error").inc()
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise LoginAlreadyExistsError(user.login) from e
            raise
        except Exception:
            DDB_OPS.labels(op="put", status="error").inc()
            raise
        return persisted

    def exists_by_login(self, login: str) -> bool:
        try:
            resp = aws_mod.table_users.get_item(
                Key={"login": login},
                ProjectionExpression="login",
            )
            DDB_OPS.labels(op="get", status="ok").inc()
        except Exception:
            DDB_OPS.labels(op="get", status="error").inc()
            raise
        return "Item" in resp
