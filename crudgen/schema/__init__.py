from .definitions import (
    ArgumentDefinition,
    InputFieldDefinition,
    InputTypeDefinition,
    MutationDefinition,
)
from .root import SchemaRoot

__all__ = [
    "ArgumentDefinition",
    "InputFieldDefinition",
    "InputTypeDefinition",
    "MutationDefinition",
    "SchemaRoot",
]
