# app/config.py
from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Defaults "normais" (sobrepostos por env/.env)
    aws_region: str = "us-east-1"
    aws_endpoint_url: Optional[str] = None
    ddb_users_table: str = Field(
        "users",
        validation_alias=AliasChoices("DDB_USERS_TABLE", "ddb_users_table"),
    )
    ddb_operators_table: str = Field(
        "operators",
        validation_alias=AliasChoices("DDB_OPERATORS_TABLE", "ddb_operators_table"),
    )

    # Regras de cadastro que variam entre instalações do sistema legado
    user_cpf_required: bool = Field(
        False,
        validation_alias=AliasChoices("USER_CPF_REQUIRED", "user_cpf_required"),
    )
    user_description_required: bool = Field(
        False,
        validation_alias=AliasChoices("USER_DESCRIPTION_REQUIRED", "user_description_required"),
    )

    log_level: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # pydantic-settings v2
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",   # sem prefixo
        extra="ignore",
    )

settings = Settings()
