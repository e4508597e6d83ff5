"""
Base contributor architecture for schema generation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ..data_model import Model
from ..schema import SchemaRoot
from .interfaces import ListMutable


@dataclass
class Context:
    """
    State handed to contributors during one schema build.

    The root is owned by the build; contributors append to it while the
    composition root visits models one at a time.
    """

    root: SchemaRoot = field(default_factory=SchemaRoot)


class BasePlugin(ABC):
    """
    Base class for schema contributors.

    A contributor adds definitions for each model while the schema is being
    built and returns bound resolvers once it is served.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.enabled = self.config.get("enabled", True)

    @abstractmethod
    def get_name(self) -> str:
        """Return the contributor name."""

    def is_enabled(self) -> bool:
        return self.enabled

    @abstractmethod
    def visit_model(self, model: Model, context: Context) -> None:
        """Add the definitions this contributor owns for ``model``."""

    def resolve_in_mutation(
        self, model: Model, data_source: ListMutable
    ) -> Dict[str, Callable[..., Any]]:
        """Return mutation resolvers keyed by root field name."""
        return {}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} enabled={self.enabled}>"
