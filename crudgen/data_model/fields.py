"""
Field descriptors for declarative models.

A field is one of three variants, identified by ``kind``: a scalar leaf, a
composite object holding its own nested fields, or a relation pointing at
another model by name.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, ClassVar, Dict, Optional

if TYPE_CHECKING:
    from .model import Model


class FieldKind(str, Enum):
    SCALAR = "scalar"
    OBJECT = "object"
    RELATION = "relation"


class Cardinality(str, Enum):
    TO_ONE = "to_one"
    TO_MANY = "to_many"


@dataclass
class Field:
    """Common attributes shared by every field variant."""

    kind: ClassVar[FieldKind]

    name: str
    type_name: str = ""
    auto_generated: bool = False
    many: bool = False

    def is_scalar(self) -> bool:
        return self.kind is FieldKind.SCALAR

    def is_list(self) -> bool:
        return self.many

    def is_auto_generated(self) -> bool:
        return self.auto_generated

    def get_typename(self) -> str:
        """Return the GraphQL type reference, wrapped for list fields."""
        if self.many:
            return f"[{self.type_name}]"
        return self.type_name


@dataclass
class ScalarField(Field):
    kind: ClassVar[FieldKind] = FieldKind.SCALAR


@dataclass
class ObjectField(Field):
    """Composite field; ``fields`` has the same shape as a model's field map."""

    kind: ClassVar[FieldKind] = FieldKind.OBJECT

    fields: Dict[str, Field] = field(default_factory=dict)

    def get_fields(self) -> Dict[str, Field]:
        return self.fields


@dataclass
class RelationField(Field):
    """
    Reference to another model.

    The target is held by name and resolved through a lookup bound by the
    model registry, never owned by the field.
    """

    kind: ClassVar[FieldKind] = FieldKind.RELATION

    target: str = ""
    _lookup: Optional[Callable[[str], "Model"]] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self):
        if not self.target:
            raise ValueError(f"Relation field '{self.name}' requires a target model")
        if not self.type_name:
            self.type_name = self.target

    @property
    def cardinality(self) -> Cardinality:
        return Cardinality.TO_MANY if self.many else Cardinality.TO_ONE

    def bind(self, lookup: Callable[[str], "Model"]) -> None:
        self._lookup = lookup

    def get_relation_to(self) -> "Model":
        if self._lookup is None:
            raise LookupError(
                f"Relation field '{self.name}' is not bound to a model registry"
            )
        return self._lookup(self.target)
