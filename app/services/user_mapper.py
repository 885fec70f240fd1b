from typing import Iterable

from app.domain.models.user import Operator, User
from app.domain.models.user_input import ValidatedUserInput


def to_user(validated: ValidatedUserInput, operators: Iterable[Operator]) -> User:
    # id e created_at ficam a cargo do repositório
    unique = {}
    for op in operators:
        unique.setdefault(op.identity, op)

    return User(
        login=validated.login,
        name=validated.name,
        cpf=validated.cpf,
        status=validated.status,
        description=validated.description,
        operators=list(unique.values()),
        mobile_system=validated.mobile_system,
    )
