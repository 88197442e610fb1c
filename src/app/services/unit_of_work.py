from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary of a use case"""

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
