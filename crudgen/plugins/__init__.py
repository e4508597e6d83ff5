from .base import BasePlugin, Context
from .interfaces import (
    BaseTypeProvider,
    CreateInputProvider,
    ListMutable,
    WhereInputProvider,
)

__all__ = [
    "BasePlugin",
    "BaseTypeProvider",
    "Context",
    "CreateInputProvider",
    "ListMutable",
    "WhereInputProvider",
]
