"""
Declarative model metadata consumed by schema contributors.
"""

from .fields import Cardinality, Field, FieldKind, ObjectField, RelationField, ScalarField
from .model import Model, ModelRegistry
from .namings import Namings, pluralize, upper_first

__all__ = [
    "Cardinality",
    "Field",
    "FieldKind",
    "Model",
    "ModelRegistry",
    "Namings",
    "ObjectField",
    "RelationField",
    "ScalarField",
    "pluralize",
    "upper_first",
]
