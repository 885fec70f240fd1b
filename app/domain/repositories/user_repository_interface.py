# app/domain/repositories/user_repository_interface.py
from abc import ABC, abstractmethod

from app.domain.models.user import User


class IUserRepository(ABC):
    """Contrato para persistência de usuários"""

    @abstractmethod
    def save(self, user: User) -> User:
        """Grava o usuário e devolve a versão persistida (com id e data de criação)"""
        pass

    @abstractmethod
    def exists_by_login(self, login: str) -> bool:
        """Indica se já existe usuário com o login informado"""
        pass
