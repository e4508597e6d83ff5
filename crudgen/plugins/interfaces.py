"""
Contracts of the collaborators a contributor consumes.

Implementations are passed explicitly when contributors are composed.
"""

from typing import Any, Awaitable, Protocol, Union, runtime_checkable

from ..data_model import Model


@runtime_checkable
class BaseTypeProvider(Protocol):
    def get_typename(self, model: Model) -> str:
        ...


@runtime_checkable
class WhereInputProvider(Protocol):
    def get_where_input_name(self, model: Model) -> str:
        ...

    def get_where_unique_input_name(self, model: Model) -> str:
        ...

    def parse_unique_where(self, where: Any) -> Any:
        """Return the canonical unique id, raising WhereValidationError."""
        ...


@runtime_checkable
class CreateInputProvider(Protocol):
    def get_create_input_name(self, model: Model) -> str:
        ...


@runtime_checkable
class ListMutable(Protocol):
    """Storage collaborator; ``update`` may return the record or an awaitable."""

    def update(self, unique_id: Any, payload: dict) -> Union[Any, Awaitable[Any]]:
        ...
