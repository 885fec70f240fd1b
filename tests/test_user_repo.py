from datetime import datetime

import pytest
from botocore.exceptions import ClientError

import app.infrastructure.repositories.user_repo as repo_mod
from app.domain.errors import LoginAlreadyExistsError
from app.domain.models.user import User, UserStatus
from app.infrastructure.repositories.user_repo import UserRepo
from conftest import make_operator


# ---------- Dummies ----------

class DummyTable:
    def __init__(self):
        self.items = {}
        self.put_calls = []

    def put_item(self, Item, ConditionExpression=None):
        self.put_calls.append({"Item": Item, "ConditionExpression": ConditionExpression})
        if ConditionExpression and Item["login"] in self.items:
            raise ClientError(
                {"Error": {"Code": "ConditionalCheckFailedException", "Message": "exists"}},
                "PutItem",
            )
        self.items[Item["login"]] = dict(Item)

    def get_item(self, Key, ProjectionExpression=None):
        item = self.items.get(Key["login"])
        return {"Item": item} if item else {}


class BrokenTable:
    def put_item(self, **kwargs):
        raise ClientError({"Error": {"Code": "ProvisionedThroughputExceededException"}}, "PutItem")

    def get_item(self, **kwargs):
        raise RuntimeError("boom")


@pytest.fixture
def table(monkeypatch):
    t = DummyTable()
    # patch no MÓDULO do repositório, não em app.aws
    monkeypatch.setattr(repo_mod.aws_mod, "table_users", t, raising=True)
    return t


def _user(**kw):
    base = dict(login="jdoe", name="John Doe", operators=[make_operator(1), make_operator(2)])
    base.update(kw)
    return User(**base)


def test_save_assigns_id_and_writes_item(table):
    saved = UserRepo().save(_user(status=UserStatus.INACTIVE, mobile_system=True))

    assert saved.id
    assert isinstance(saved.created_at, datetime)
    item = table.items["jdoe"]
    assert item["id"] == saved.id
    assert item["status"] == "Inactive"
    assert item["operator_ids"] == [1, 2]
    assert item["mobile_system"] is True
    # atributos nulos não vão para o DynamoDB
    assert "cpf" not in item and "description" not in item
    assert table.put_calls[0]["ConditionExpression"] == "attribute_not_exists(login)"


def test_save_does_not_mutate_input(table):
    user = _user()
    UserRepo().save(user)
    assert user.id is None


def test_save_duplicate_login(table):
    repo = UserRepo()
    repo.save(_user())
    with pytest.raises(LoginAlreadyExistsError) as exc:
        repo.save(_user(name="Outro"))
    assert exc.value.login == "jdoe"


def test_save_other_client_errors_propagate(monkeypatch):
    monkeypatch.setattr(repo_mod.aws_mod, "table_users", BrokenTable(), raising=True)
    with pytest.raises(ClientError):
        UserRepo().save(_user())


def test_exists_by_login(table):
    repo = UserRepo()
    assert repo.exists_by_login("jdoe") is False
    repo.save(_user())
    assert repo.exists_by_login("jdoe") is True


def test_exists_by_login_error_path(monkeypatch):
    monkeypatch.setattr(repo_mod.aws_mod, "table_users", BrokenTable(), raising=True)
    with pytest.raises(RuntimeError):
        UserRepo().exists_by_login("jdoe")
