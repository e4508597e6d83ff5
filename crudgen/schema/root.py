"""
SchemaRoot - the builder value contributors write definitions into.

One root is created per schema build and handed to contributors through the
build context; it is treated as immutable once the build is finished.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from graphql import GraphQLSchema, build_schema

from .definitions import InputTypeDefinition, MutationDefinition

logger = logging.getLogger(__name__)


class SchemaRoot:
    """
    Collects type, input, query and mutation definitions for one schema.

    Example:
        root = SchemaRoot()
        root.add_type("type Post { id: ID title: String }")
        root.add_input(InputTypeDefinition("PostUpdateInput"))
        sdl = root.render()
    """

    def __init__(self):
        self._types: List[str] = []
        self._inputs: Dict[str, InputTypeDefinition] = {}
        self._input_order: List[InputTypeDefinition] = []
        self._queries: List[str] = []
        self._mutations: List[MutationDefinition] = []

    def add_type(self, sdl: str) -> None:
        self._types.append(sdl.strip())

    def add_query(self, sdl: str) -> None:
        self._queries.append(sdl.strip())

    def add_input(self, definition: InputTypeDefinition) -> None:
        """
        Append an input definition.

        Appending is unconditional; callers that must not redefine a name
        check :meth:`has_input` first.
        """
        self._inputs[definition.name] = definition
        self._input_order.append(definition)
        logger.debug("Added input %s", definition.name)

    def has_input(self, name: str) -> bool:
        return name in self._inputs

    def get_input(self, name: str) -> InputTypeDefinition:
        return self._inputs[name]

    @property
    def inputs(self) -> List[InputTypeDefinition]:
        return list(self._input_order)

    def add_mutation(self, definition: MutationDefinition) -> None:
        self._mutations.append(definition)
        logger.debug("Added mutation %s", definition.name)

    @property
    def mutations(self) -> List[MutationDefinition]:
        return list(self._mutations)

    def get_mutation(self, name: str) -> Optional[MutationDefinition]:
        for definition in self._mutations:
            if definition.name == name:
                return definition
        return None

    def render(self) -> str:
        """Render every collected definition as SDL text."""
        parts: List[str] = list(self._types)
        parts.extend(definition.to_sdl() for definition in self._input_order)
        if self._queries:
            body = "\n".join(f"  {query}" for query in self._queries)
            parts.append(f"type Query {{\n{body}\n}}")
        if self._mutations:
            body = "\n".join(f"  {mutation.to_sdl()}" for mutation in self._mutations)
            parts.append(f"type Mutation {{\n{body}\n}}")
        return "\n\n".join(parts) + "\n"

    def build_schema(self) -> GraphQLSchema:
        return build_schema(self.render())

    @staticmethod
    def bind_resolvers(
        schema: GraphQLSchema,
        resolvers: Dict[str, Callable[..., Any]],
    ) -> GraphQLSchema:
        """
        Attach resolvers to root mutation fields by name.

        Raises:
            KeyError: if a resolver names a field missing from the schema
        """
        mutation_type = schema.mutation_type
        if mutation_type is None:
            raise KeyError("Schema has no Mutation type")
        for field_name, resolver in resolvers.items():
            mutation_type.fields[field_name].resolve = resolver
        return schema
