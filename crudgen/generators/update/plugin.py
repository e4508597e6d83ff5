"""
UpdatePlugin - contributes the update mutation surface of each model.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ...core.settings import UpdateGeneratorSettings
from ...data_model import Model
from ...hooks import HookRegistry
from ...plugins.base import BasePlugin, Context
from ...plugins.interfaces import (
    BaseTypeProvider,
    CreateInputProvider,
    ListMutable,
    WhereInputProvider,
)
from .inputs import InputTypeSynthesizer
from .mutation import MutationRegistrar
from .relations import RelationInputBuilder
from .resolver import ResolverFactory

logger = logging.getLogger(__name__)


class UpdatePlugin(BasePlugin):
    """
    Generates ``<Model>UpdateInput`` (with nested and relation inputs), the
    ``update<Model>`` mutation and its resolver.

    Collaborators are given explicitly when the plugin is composed.

    Example:
        plugin = UpdatePlugin(
            base_type=base_type_plugin,
            where_input=where_input_plugin,
            create_input=create_plugin,
            hooks=HookRegistry.from_settings(),
        )
        plugin.visit_model(post, context)
        resolvers = plugin.resolve_in_mutation(post, post_storage)
    """

    def __init__(
        self,
        base_type: BaseTypeProvider,
        where_input: WhereInputProvider,
        create_input: CreateInputProvider,
        hooks: Optional[HookRegistry] = None,
        settings: Optional[UpdateGeneratorSettings] = None,
    ):
        self.settings = settings or UpdateGeneratorSettings.from_settings()
        super().__init__({"enabled": self.settings.generate_update})
        self.hooks = hooks if hooks is not None else HookRegistry.from_settings(self.settings)

        self.synthesizer = InputTypeSynthesizer(
            RelationInputBuilder(create_input, where_input)
        )
        self.registrar = MutationRegistrar(base_type, where_input)
        self.resolver_factory = ResolverFactory(where_input, self.hooks)

    def get_name(self) -> str:
        return "UpdatePlugin"

    def get_mutation_name(self, model: Model) -> str:
        """Return ``update<CapitalSingular>`` for ``model``."""
        return self.registrar.get_mutation_name(model)

    def get_update_input_name(self, model: Model) -> str:
        """Return the name of the top-level update input of ``model``."""
        return self.synthesizer.get_update_input_name(model)

    def _should_generate(self, model: Model) -> bool:
        if not self.is_enabled():
            return False
        if self.settings.is_model_excluded(model.get_name()):
            logger.debug("Skipped update generation for excluded model %s", model.get_name())
            return False
        return True

    def visit_model(self, model: Model, context: Context) -> None:
        """
        Register the update inputs and the ``update<Model>`` mutation.

        Nothing is registered for excluded models or for models without any
        client-writable field.

        Args:
            model: Model being visited
            context: Build context owning the schema root
        """
        if not self._should_generate(model):
            return
        input_name = self.synthesizer.generate_update_input(model, context.root)
        if input_name is None:
            logger.debug("No update mutation for %s, nothing is writable", model.get_name())
            return
        self.registrar.register(model, input_name, context.root)

    def resolve_in_mutation(
        self, model: Model, data_source: ListMutable
    ) -> Dict[str, Callable[..., Any]]:
        """
        Build the update resolver of ``model``.

        Args:
            model: Model the resolver updates
            data_source: Storage collaborator receiving the write

        Returns:
            ``{"update<Model>": resolver}``, or an empty dict when
            :meth:`visit_model` registers no mutation for the model
        """
        if not self._should_generate(model):
            return {}
        if not self.synthesizer.has_writable_fields(model):
            return {}
        return {
            self.get_mutation_name(model): self.resolver_factory.create_resolver(
                model, data_source
            )
        }
