import os
from typing import Iterable, List

import pytest

from app.domain.models.user import Operator, User
from app.domain.repositories.operator_repository_interface import IOperatorRepository
from app.domain.repositories.user_repository_interface import IUserRepository

AWS_ENDPOINT = os.getenv("AWS_ENDPOINT_URL")
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")


# ========= Repositórios em memória =========

class InMemoryUserRepo(IUserRepository):
    def __init__(self):
        self.saved: List[User] = []
        self.save_calls = 0

    def save(self, user: User) -> User:
        self.save_calls += 1
        persisted = user.model_copy(update={"id": f"u-{self.save_calls}"})
        self.saved.append(persisted)
        return persisted

    def exists_by_login(self, login: str) -> bool:
        return any(u.login == login for u in self.saved)


class InMemoryOperatorRepo(IOperatorRepository):
    def __init__(self, operators: Iterable[Operator] = ()):
        self._by_id = {op.id: op for op in operators}
        self.calls: List[List[int]] = []

    def find_by_ids(self, ids: Iterable[int]) -> List[Operator]:
        ids = list(ids)
        self.calls.append(ids)
        # ordem invertida de propósito: o contrato não garante ordem
        return [self._by_id[i] for i in reversed(ids) if i in self._by_id]


def make_operator(op_id: int) -> Operator:
    return Operator(id=op_id, code=f"OP{op_id:03d}", name=f"Operadora {op_id}")


@pytest.fixture
def user_repo():
    return InMemoryUserRepo()


@pytest.fixture
def operator_repo():
    return InMemoryOperatorRepo([make_operator(1), make_operator(2), make_operator(3)])


# ========= LocalStack (opcional) =========

@pytest.fixture(scope="session")
def dynamodb_resource():
    if not AWS_ENDPOINT:
        pytest.skip("AWS_ENDPOINT_URL não definido; testes com LocalStack ignorados")

    import boto3

    # Credenciais “dummy” para LocalStack
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
    os.environ.setdefault("AWS_REGION", AWS_REGION)

    return boto3.resource("dynamodb", region_name=AWS_REGION, endpoint_url=AWS_ENDPOINT)


def _ensure_table(resource, name, key, key_type):
    from botocore.exceptions import ClientError

    try:
        table = resource.create_table(
            TableName=name,
            AttributeDefinitions=[{"AttributeName": key, "AttributeType": key_type}],
            KeySchema=[{"AttributeName": key, "KeyType": "HASH"}],
            BillingMode="PAY_PER_REQUEST",
        )
        table.wait_until_exists()
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceInUseException":
            raise
        table = resource.Table(name)
    return table


@pytest.fixture(scope="session")
def users_table(dynamodb_resource):
    return _ensure_table(dynamodb_resource, os.getenv("DDB_USERS_TABLE", "users"), "login", "S")


@pytest.fixture(scope="session")
def operators_table(dynamodb_resource):
    return _ensure_table(dynamodb_resource, os.getenv("DDB_OPERATORS_TABLE", "operators"), "id", "N")
