"""
Update mutation signature registration.
"""

import logging

from ...data_model import Model
from ...plugins.interfaces import BaseTypeProvider, WhereInputProvider
from ...schema import ArgumentDefinition, MutationDefinition, SchemaRoot

logger = logging.getLogger(__name__)


class MutationRegistrar:
    """
    Registers ``update<Model>(where: <WhereUnique>, data: <UpdateInput>!): <Model>``.

    The plain object type is returned, without payload wrapper. Registration
    is append-only: each model is expected to be visited once per build.
    """

    def __init__(self, base_type: BaseTypeProvider, where_input: WhereInputProvider):
        self.base_type = base_type
        self.where_input = where_input

    @staticmethod
    def get_mutation_name(model: Model) -> str:
        """Return ``update<CapitalSingular>`` for ``model``."""
        return f"update{model.get_namings().capital_singular}"

    def build_definition(self, model: Model, input_name: str) -> MutationDefinition:
        """
        Compute the mutation signature of ``model``.

        Args:
            model: Model being updated
            input_name: Name of the model's update input type

        Returns:
            Definition with a nullable ``where`` and a required ``data``
            argument, returning the model's plain object type
        """
        return MutationDefinition(
            name=self.get_mutation_name(model),
            arguments=[
                ArgumentDefinition(
                    "where", self.where_input.get_where_unique_input_name(model)
                ),
                ArgumentDefinition("data", f"{input_name}!"),
            ],
            return_type=self.base_type.get_typename(model),
        )

    def register(self, model: Model, input_name: str, root: SchemaRoot) -> MutationDefinition:
        """
        Append the mutation signature of ``model`` to ``root``.

        No duplicate check is made.

        Returns:
            The registered definition
        """
        definition = self.build_definition(model, input_name)
        root.add_mutation(definition)
        return definition
