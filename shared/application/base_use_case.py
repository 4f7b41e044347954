"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass(frozen=True)
class UseCaseResult(Generic[OutputDTO]):
    """
    Outcome of a use case.

    Failures are raised as domain exceptions and mapped at the API boundary,
    so a result that reaches the caller always carries ``success=True``.
    """
    data: Optional[OutputDTO] = None
    success: bool = True

    @classmethod
    def ok(cls, data: Optional[OutputDTO] = None) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """One application operation with its collaborators injected."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        pass
