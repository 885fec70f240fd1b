from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple, Union
from datetime import datetime
from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Operator(BaseModel):
    """Operadora que pode ser vinculada a um usuário."""
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @property
    def identity(self) -> Tuple[str, Union[int, str]]:
        # id quando já atribuído, senão o código (único)
        if self.id is not None:
            return ("id", self.id)
        return ("code", self.code)


class User(BaseModel):
    id: Optional[str] = None
    login: str = Field(..., max_length=50)
    name: str = Field(..., max_length=100)
    cpf: Optional[str] = None
    status: UserStatus = UserStatus.ACTIVE
    description: Optional[str] = Field(default=None, max_length=255)
    operators: List[Operator] = Field(default_factory=list)
    mobile_system: bool = False
    created_at: Optional[datetime] = None

    @property
    def identity(self) -> Tuple[str, str]:
        if self.id is not None:
            return ("id", self.id)
        return ("login", self.login)

    @property
    def operator_ids(self) -> List[int]:
        return [op.id for op in self.operators if op.id is not None]
