"""Unit of work interface - transaction boundary for mutations."""

from abc import ABC, abstractmethod


class IUnitOfWork(ABC):
    """
    Transaction boundary shared by the repositories of one request.
    
    Writes made through repositories become durable only on commit.
    """
    
    @abstractmethod
    async def commit(self) -> None:
        pass
    
    @abstractmethod
    async def rollback(self) -> None:
        pass
