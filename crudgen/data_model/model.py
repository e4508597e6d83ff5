"""
Model descriptor and the registry resolving relation targets by name.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional

from .fields import Field, RelationField
from .namings import Namings

logger = logging.getLogger(__name__)


class Model:
    """Declarative description of one entity type."""

    def __init__(
        self,
        name: str,
        fields: Iterable[Field] = (),
        plural: Optional[str] = None,
    ):
        self.name = name
        self._namings = Namings.from_name(name, plural=plural)
        self._fields: Dict[str, Field] = {}
        for model_field in fields:
            if model_field.name in self._fields:
                raise ValueError(
                    f"Duplicate field '{model_field.name}' on model '{name}'"
                )
            self._fields[model_field.name] = model_field

    def get_name(self) -> str:
        return self.name

    def get_namings(self) -> Namings:
        return self._namings

    def get_fields(self) -> Dict[str, Field]:
        return self._fields

    def get_field(self, name: str) -> Optional[Field]:
        return self._fields.get(name)

    def relation_fields(self) -> Iterator[RelationField]:
        for model_field in self._fields.values():
            if isinstance(model_field, RelationField):
                yield model_field

    def __repr__(self) -> str:
        return f"<Model {self.name} fields={list(self._fields)}>"


class ModelRegistry:
    """
    Holds every model of one build and resolves relation targets.

    Relation fields are bound to :meth:`get` on registration, so targets may
    be registered in any order as long as they exist before lookup.
    """

    def __init__(self, models: Iterable[Model] = ()):
        self._models: Dict[str, Model] = {}
        for model in models:
            self.register(model)

    def register(self, model: Model) -> Model:
        if model.name in self._models:
            raise ValueError(f"Model '{model.name}' is already registered")
        self._models[model.name] = model
        for relation in model.relation_fields():
            relation.bind(self.get)
        logger.debug("Registered model %s", model.name)
        return model

    def get(self, name: str) -> Model:
        try:
            return self._models[name]
        except KeyError:
            raise LookupError(f"Unknown model '{name}'") from None

    def __contains__(self, name: str) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[Model]:
        return iter(self._models.values())

    def __len__(self) -> int:
        return len(self._models)
