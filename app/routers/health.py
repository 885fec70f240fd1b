import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, HTTPException

import app.aws as aws_mod

router = APIRouter(prefix="", tags=["health"])

logger = logging.getLogger("health")


@router.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


def _table_status(name: str) -> str:
    # Table.table_status fica em cache no resource após o primeiro load
    resp = aws_mod.ddb.meta.client.describe_table(TableName=name)
    return resp["Table"]["TableStatus"]


@router.get("/health/ready", include_in_schema=False)
def ready():
    # tabelas precisam existir e estar ACTIVE para aceitar cadastros
    tables = {}
    for table in (aws_mod.table_users, aws_mod.table_operators):
        try:
            tables[table.name] = _table_status(table.name)
        except (ClientError, BotoCoreError) as e:
            logger.warning("Tabela %s indisponível: %s", table.name, e)
            tables[table.name] = "UNAVAILABLE"

    if any(s != "ACTIVE" for s in tables.values()):
        raise HTTPException(status_code=503, detail={"status": "unavailable", "tables": tables})
    return {"status": "ok", "tables": tables}
