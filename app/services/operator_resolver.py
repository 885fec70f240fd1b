# app/services/operator_resolver.py
import logging
from typing import Dict, List, Sequence

from app.domain.errors import MissingOperatorsError
from app.domain.models.user import Operator
from app.domain.repositories.operator_repository_interface import IOperatorRepository

logger = logging.getLogger("operators")


def resolve_operators(operator_ids: Sequence[int], repo: IOperatorRepository) -> List[Operator]:
    """
    Carrega as operadoras pedidas numa única busca em lote.
    Todas precisam existir; as ausentes voltam em MissingOperatorsError.
    Devolve na ordem em que foram pedidas.
    """
    if not operator_ids:
        return []

    requested = list(dict.fromkeys(operator_ids))
    found: Dict[int, Operator] = {op.id: op for op in repo.find_by_ids(requested) if op.id is not None}

    missing = [i for i in requested if i not in found]
    if missing:
        logger.info("Operadoras inexistentes: %s", missing)
        raise MissingOperatorsError(missing)

    return [found[i] for i in requested]
