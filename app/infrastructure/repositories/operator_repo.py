# app/infrastructure/repositories/operator_repo.py
import logging
import time
from typing import Iterable, List

from app.domain.models.user import Operator
from app.domain.repositories.operator_repository_interface import IOperatorRepository
import app.aws as aws_mod

from app.core.metrics import DDB_OPS

logger = logging.getLogger("operators")

# limite de chaves por chamada do BatchGetItem
BATCH_SIZE = 100

# UnprocessedKeys vem de throttling; o boto3 não repete porque a chamada teve sucesso
MAX_UNPROCESSED_RETRIES = 5
BACKOFF_BASE_SECONDS = 0.05
BACKOFF_MAX_SECONDS = 1.0


class UnprocessedKeysError(RuntimeError):
    """Chaves continuaram em UnprocessedKeys depois de todas as tentativas."""

    def __init__(self, pending: int, attempts: int):
        self.pending = pending
        self.attempts = attempts
        super().__init__(f"{pending} chaves não processadas após {attempts} tentativas")


def _to_operator(item: dict) -> Operator:
    # números do DynamoDB chegam como Decimal
    return Operator(
        id=int(item["id"]),
        code=str(item["code"]),
        name=item["name"],
        description=item.get("description"),
    )


def _backoff(attempt: int) -> float:
    return min(BACKOFF_BASE_SECONDS * (2 ** (attempt - 1)), BACKOFF_MAX_SECONDS)


class OperatorRepo(IOperatorRepository):
    def _batch_get(self, request: dict) -> dict:
        try:
            resp = aws_mod.ddb.batch_get_item(RequestItems=request)
            DDB_OPS.labels(op="batch_get", status="ok").inc()
            return resp
        except Exception:
            DDB_OPS.labels(op="batch_get", status="error").inc()
            raise

    def find_by_ids(self, ids: Iterable[int]) -> List[Operator]:
        """
        Busca em lote na tabela de operadoras.
        Chaves devolvidas em UnprocessedKeys são pedidas de novo com backoff
        exponencial; passado o limite de tentativas levanta UnprocessedKeysError.
        """
        keys = list(dict.fromkeys(int(i) for i in ids))
        table_name = aws_mod.table_operators.name
        found: List[Operator] = []

        for start in range(0, len(keys), BATCH_SIZE):
            chunk = keys[start:start + BATCH_SIZE]
            request = {table_name: {"Keys": [{"id": k} for k in chunk]}}
            retries = 0
            while True:
                resp = self._batch_get(request)
                found.extend(_to_operator(it) for it in resp.get("Responses", {}).get(table_name, []))
                request = resp.get("UnprocessedKeys") or None
                if not request:
                    break

                pending = len(request.get(table_name, {}).get("Keys", []))
                if retries >= MAX_UNPROCESSED_RETRIES:
                    DDB_OPS.labels(op="batch_get", status="unprocessed").inc()
                    raise UnprocessedKeysError(pending, retries + 1)
                retries += 1
                delay = _backoff(retries)
                logger.warning(
                    "BatchGetItem devolveu %d chaves não processadas; nova tentativa %d em %.2fs",
                    pending, retries, delay,
                )
                time.sleep(delay)

        return found
