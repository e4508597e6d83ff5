"""
Resolver factory for update mutations.
"""

import logging
from typing import Any, Callable, Optional

from ...data_model import Model
from ...hooks import HookRegistry
from ...plugins.interfaces import ListMutable, WhereInputProvider
from .pipeline import UpdateContext, UpdatePipeline, build_update_pipeline

logger = logging.getLogger(__name__)


class ResolverFactory:
    """
    Builds one bound async resolver per model.

    Hooks are looked up once, when the resolver is created. The resolver
    follows the graphql-core signature ``(root, info, **arguments)`` and
    returns the record produced by the storage collaborator.
    """

    def __init__(
        self,
        where_input: WhereInputProvider,
        hooks: Optional[HookRegistry] = None,
    ):
        self.where_input = where_input
        self.hooks = hooks or HookRegistry()

    def build_pipeline(self, model: Model, data_source: ListMutable) -> UpdatePipeline:
        """Build the update pipeline of ``model`` with its registered hooks."""
        return build_update_pipeline(
            self.where_input,
            data_source,
            self.hooks.get(model.get_name()),
        )

    def create_resolver(
        self, model: Model, data_source: ListMutable
    ) -> Callable[..., Any]:
        """
        Create the bound update resolver of ``model``.

        Args:
            model: Model the resolver updates
            data_source: Storage collaborator receiving the write

        Returns:
            Async resolver ``(root, info, where=None, data=None)`` returning
            the stored record; the pipeline is exposed as ``.pipeline``
        """
        pipeline = self.build_pipeline(model, data_source)

        async def resolve_update(root, info, where=None, data=None):
            ctx = UpdateContext(model=model, raw_where=where, raw_data=data, info=info)
            ctx = await pipeline.execute(ctx)
            return ctx.result

        resolve_update.pipeline = pipeline
        logger.debug("Created update resolver for %s: %r", model.get_name(), pipeline)
        return resolve_update
