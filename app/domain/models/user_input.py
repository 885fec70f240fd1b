from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Optional, Union

from .user import UserStatus


# ---- Formatos aceitos para a seleção de operadoras ----

class ExplicitIds(BaseModel):
    """Lista de ids numéricos enviada por clientes novos."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["explicit_ids"] = "explicit_ids"
    ids: List[int] = Field(default_factory=list)


class LegacyCsv(BaseModel):
    """String "12,34,56" enviada pelas integrações antigas."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["legacy_csv"] = "legacy_csv"
    csv: str


class LegacyListItems(BaseModel):
    """Textos dos itens da lista da tela antiga, com o id embutido nas posições 8..12."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["legacy_list_items"] = "legacy_list_items"
    items: List[str] = Field(default_factory=list)


OperatorSelection = Annotated[
    Union[ExplicitIds, LegacyCsv, LegacyListItems],
    Field(discriminator="kind"),
]


class CreateUserInput(BaseModel):
    login: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    cpf: Optional[str] = None
    status: Optional[str] = None
    active: Optional[bool] = None
    operator_selection: Optional[OperatorSelection] = None
    mobile_system: bool = False


class ValidatedUserInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: str
    name: str
    description: Optional[str] = None
    cpf: Optional[str] = None
    status: UserStatus
    operator_ids: List[int]
    mobile_system: bool
