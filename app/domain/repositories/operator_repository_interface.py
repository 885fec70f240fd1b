# app/domain/repositories/operator_repository_interface.py
from abc import ABC, abstractmethod
from typing import Iterable, List

from app.domain.models.user import Operator


class IOperatorRepository(ABC):
    """Contrato de leitura das operadoras"""

    @abstractmethod
    def find_by_ids(self, ids: Iterable[int]) -> List[Operator]:
        """Busca em lote; a ordem do resultado não é garantida"""
        pass
