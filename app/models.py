# models.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from app.domain.models.user_input import CreateUserInput
from app.services.operator_normalizer import select_operator_input


class CreateUserRequest(BaseModel):
    """
    Payload do POST /users.
    Aceita snake_case, camelCase e os nomes usados pelo formulário legado.
    A obrigatoriedade dos campos é checada no validador, não aqui,
    para que todos os erros voltem juntos.
    """
    model_config = ConfigDict(extra="ignore")

    login: Optional[str] = None
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "nome"))
    description: Optional[str] = Field(default=None, validation_alias=AliasChoices("description", "descricao"))
    cpf: Optional[str] = None
    status: Optional[str] = None
    active: Optional[bool] = None
    operator_ids: Optional[List[int]] = Field(
        default=None,
        validation_alias=AliasChoices("operator_ids", "operatorIds", "operadoras"),
    )
    operators_csv: Optional[str] = Field(
        default=None,
        max_length=2000,
        validation_alias=AliasChoices("operators_csv", "operatorsCsv", "operadorasCsv"),
    )
    operator_list_items: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("operator_list_items", "operatorListItems", "operadorasLista"),
    )
    mobile_system: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("mobile_system", "mobileSystem"),
    )

    def to_input(self) -> CreateUserInput:
        return CreateUserInput(
            login=self.login,
            name=self.name,
            description=self.description,
            cpf=self.cpf,
            status=self.status,
            active=self.active,
            operator_selection=select_operator_input(
                self.operator_ids, self.operators_csv, self.operator_list_items
            ),
            mobile_system=bool(self.mobile_system),
        )


class CreateUserResponse(BaseModel):
    message: str


class ValidationErrorDetail(BaseModel):
    message: str
    field_errors: Dict[str, str] = Field(default_factory=dict)
    object_errors: List[str] = Field(default_factory=list)


class MissingOperatorsDetail(BaseModel):
    message: str
    missing_operator_ids: List[int]


class LoginExistsResponse(BaseModel):
    login: str
    exists: bool
