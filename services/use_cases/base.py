"""
Base use case class with common functionality.
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from services.state import AppState


ResultType = TypeVar("ResultType")


class BaseUseCase(ABC, Generic[ResultType]):
    """
    Abstract base class for use cases.

    A use case encapsulates a single business operation and orchestrates
    the interactions between the in-memory state, its stores and the
    derived statistics.
    """

    def __init__(self, state: AppState):
        """
        Initialize use case with application state.

        Args:
            state: Loaded application state
        """
        self.state = state

    @abstractmethod
    async def execute(self, *args, **kwargs) -> ResultType:
        """
        Execute the use case.

        Subclasses must implement this method with their specific logic.

        Returns:
            Result of the use case execution
        """
        pass
