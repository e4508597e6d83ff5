"""
Update input synthesis.

Walks a model's fields in declaration order and produces
``<Model>UpdateInput`` plus one ``<Prefix>UpdateInput`` per composite field,
at any depth.
"""

import logging
from typing import Dict, Optional

from ...data_model import Field, FieldKind, Model, ObjectField, upper_first
from ...exceptions import UpdateGeneratorError
from ...schema import InputTypeDefinition, SchemaRoot
from .relations import RelationInputBuilder

logger = logging.getLogger(__name__)


class InputTypeSynthesizer:
    """
    Builds the update input tree of a model.

    Rules applied at every depth:
    - auto-generated fields are never writable and are skipped,
    - scalars are emitted as ``name: Type``,
    - composites recurse under ``<prefix><FieldName>``.

    Relations are only writable at the top level, through the relation input
    types. A relation nested in a composite is dropped. A composite left
    without any writable field is dropped as well, since GraphQL rejects
    input types without fields.
    """

    def __init__(self, relation_builder: RelationInputBuilder):
        self.relation_builder = relation_builder

    @staticmethod
    def get_update_input_name(model: Model) -> str:
        """Return ``<CapitalSingular>UpdateInput`` for ``model``."""
        return f"{model.get_namings().capital_singular}UpdateInput"

    def generate_update_input(self, model: Model, root: SchemaRoot) -> Optional[str]:
        """
        Register ``<Model>UpdateInput`` and its nested inputs on ``root``.

        Args:
            model: Model whose update input is synthesized
            root: Schema root receiving the input definitions

        Returns:
            The update input type name, or ``None`` when the model has no
            client-writable field and nothing was registered
        """
        input_name = self.get_update_input_name(model)
        definition = self._synthesize(
            input_name,
            model.get_namings().capital_singular,
            model.get_fields(),
            root,
            relation_owner=model,
        )
        if not definition.fields:
            logger.debug("Model %s has no writable field, no update input", model.get_name())
            return None
        root.add_input(definition)
        return input_name

    def has_writable_fields(self, model: Model) -> bool:
        """
        Check whether ``model`` would produce a non-empty update input.

        Args:
            model: Model to inspect

        Returns:
            True if at least one field survives the synthesis rules
        """
        return self._any_writable(model.get_fields(), top_level=True)

    def _any_writable(self, fields: Dict[str, Field], top_level: bool) -> bool:
        for field in fields.values():
            if field.is_auto_generated():
                continue
            if field.kind is FieldKind.SCALAR:
                return True
            if field.kind is FieldKind.RELATION and top_level:
                return True
            if field.kind is FieldKind.OBJECT and self._any_writable(
                field.get_fields(), top_level=False
            ):
                return True
        return False

    def _synthesize(
        self,
        input_name: str,
        prefix: str,
        fields: Dict[str, Field],
        root: SchemaRoot,
        relation_owner: Optional[Model],
    ) -> InputTypeDefinition:
        definition = InputTypeDefinition(input_name)
        for name, field in fields.items():
            if field.is_auto_generated():
                continue

            if field.kind is FieldKind.SCALAR:
                definition.add_field(name, field.get_typename())
            elif field.kind is FieldKind.OBJECT:
                nested_type = self._object_input(prefix, name, field, root)
                if nested_type is None:
                    logger.debug(
                        "Dropped composite %s of %s, no writable nested field",
                        name,
                        input_name,
                    )
                    continue
                definition.add_field(name, nested_type)
            elif field.kind is FieldKind.RELATION:
                if relation_owner is None:
                    logger.debug(
                        "Dropped relation %s nested in composite input %s",
                        name,
                        input_name,
                    )
                    continue
                definition.add_field(
                    name, self.relation_builder.build(relation_owner, field, root)
                )
            else:
                raise UpdateGeneratorError(
                    f"Unsupported field kind {field.kind!r}", field_name=name
                )
        return definition

    def _object_input(
        self, prefix: str, name: str, field: ObjectField, root: SchemaRoot
    ) -> Optional[str]:
        """
        Register the input of one composite field.

        Returns:
            The type reference for the parent input, or ``None`` when the
            composite has no writable field (nothing is registered then)
        """
        field_prefix = f"{prefix}{upper_first(name)}"
        input_name = f"{field_prefix}UpdateInput"
        definition = self._synthesize(
            input_name, field_prefix, field.get_fields(), root, relation_owner=None
        )
        if not definition.fields:
            return None
        root.add_input(definition)
        if field.is_list():
            return f"[{input_name}]"
        return input_name
