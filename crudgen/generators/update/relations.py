"""
Generator for relation update input types.

Every relation exposes the same four operations (create, connect, disconnect,
delete); to-many relations take lists for each of them.
"""

import logging

from ...data_model import Cardinality, Model, RelationField
from ...exceptions import UpdateGeneratorError
from ...plugins.interfaces import CreateInputProvider, WhereInputProvider
from ...schema import InputTypeDefinition, SchemaRoot

logger = logging.getLogger(__name__)


class RelationInputBuilder:
    """
    Builds ``<Model>UpdateOneInput`` and ``<Model>UpdateManyInput`` types.

    Names are derived from the referencing model only. A model is therefore
    expected to declare at most one to-one and one to-many relation: a second
    relation of the same cardinality reuses the first one's input type.
    """

    def __init__(
        self,
        create_input: CreateInputProvider,
        where_input: WhereInputProvider,
    ):
        self.create_input = create_input
        self.where_input = where_input

    def get_relation_input_name(self, model: Model, cardinality: Cardinality) -> str:
        """
        Name the relation input of ``model`` for one cardinality.

        Args:
            model: Referencing model (never the relation target)
            cardinality: To-one or to-many

        Returns:
            ``<Model>UpdateOneInput`` or ``<Model>UpdateManyInput``

        Raises:
            UpdateGeneratorError: for an unknown cardinality
        """
        capital = model.get_namings().capital_singular
        if cardinality is Cardinality.TO_ONE:
            return f"{capital}UpdateOneInput"
        if cardinality is Cardinality.TO_MANY:
            return f"{capital}UpdateManyInput"
        raise UpdateGeneratorError(
            f"Unsupported relation cardinality {cardinality!r}", model.get_name()
        )

    def build(self, model: Model, field: RelationField, root: SchemaRoot) -> str:
        """
        Register the relation input for ``field`` if missing.

        Returns:
            The input type name the parent input references
        """
        cardinality = field.cardinality
        input_name = self.get_relation_input_name(model, cardinality)
        if root.has_input(input_name):
            logger.debug(
                "Relation input %s already registered, reused for %s.%s",
                input_name,
                model.get_name(),
                field.name,
            )
            return input_name

        relation_to = field.get_relation_to()
        create_name = self.create_input.get_create_input_name(relation_to)
        where_unique = self.where_input.get_where_unique_input_name(relation_to)

        definition = InputTypeDefinition(input_name)
        if cardinality is Cardinality.TO_ONE:
            definition.add_field("create", create_name)
            definition.add_field("connect", where_unique)
            definition.add_field("disconnect", "Boolean")
            definition.add_field("delete", "Boolean")
        else:
            definition.add_field("create", f"[{create_name}]")
            definition.add_field("connect", f"[{where_unique}]")
            definition.add_field("disconnect", f"[{where_unique}]")
            definition.add_field("delete", f"[{where_unique}]")

        root.add_input(definition)
        return input_name
