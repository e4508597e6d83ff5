"""
Async update pipeline.

An update runs as an ordered sequence of steps, each awaited before the next
one starts. Errors are never caught here: the context is marked failed and
the original exception propagates to the caller.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from ...data_model import Model
from ...hooks import ModelHooks
from ...plugins.interfaces import ListMutable, WhereInputProvider

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    PENDING = "pending"
    PARSING_WHERE = "parsing_where"
    BEFORE_HOOK = "before_hook"
    TRANSFORMING = "transforming"
    WRITING = "writing"
    AFTER_HOOK = "after_hook"
    DONE = "done"
    FAILED = "failed"


async def resolve_awaitable(value: Any) -> Any:
    """Await ``value`` when it is awaitable, so sync and async callables mix."""
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass
class UpdateContext:
    """
    Carries state through one update pipeline run.

    Attributes:
        model: Model being updated
        raw_where: ``where`` argument as received
        raw_data: ``data`` argument as received (never replaced)
        info: GraphQL resolve info
        unique_id: Canonical identifier parsed from ``raw_where``
        payload: Effective payload written to storage
        result: Record returned by storage
        state: Current pipeline state
        write_committed: True once storage returned; stays True on later failure
        history: Every state entered, in order
    """

    model: Model
    raw_where: Any
    raw_data: Any
    info: Any = None
    unique_id: Any = None
    payload: Any = None
    result: Any = None
    state: PipelineState = PipelineState.PENDING
    write_committed: bool = False
    history: List[PipelineState] = field(default_factory=lambda: [PipelineState.PENDING])

    def transition(self, state: PipelineState) -> None:
        self.state = state
        self.history.append(state)

    @property
    def model_name(self) -> str:
        return self.model.get_name()


class UpdateStep(ABC):
    """
    Base class for update pipeline steps.

    Attributes:
        order: Execution order (lower = earlier)
        name: Identifier for logging
        state: Pipeline state entered while the step runs
    """

    order: int = 100
    name: str = "base"
    state: PipelineState = PipelineState.PENDING

    @abstractmethod
    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        """Run the step and return the (possibly same) context."""

    def should_run(self, ctx: UpdateContext) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} order={self.order} name={self.name}>"


class ParseWhereStep(UpdateStep):
    order = 10
    name = "parse_where"
    state = PipelineState.PARSING_WHERE

    def __init__(self, where_input: WhereInputProvider):
        self.where_input = where_input

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        ctx.unique_id = await resolve_awaitable(
            self.where_input.parse_unique_where(ctx.raw_where)
        )
        return ctx


class BeforeUpdateHookStep(UpdateStep):
    order = 20
    name = "before_update"
    state = PipelineState.BEFORE_HOOK

    def __init__(self, hooks: ModelHooks):
        self.hook = hooks.before_update

    def should_run(self, ctx: UpdateContext) -> bool:
        return self.hook is not None

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        await resolve_awaitable(self.hook(ctx.raw_where, ctx.raw_data))
        return ctx


class TransformPayloadStep(UpdateStep):
    order = 30
    name = "transform_update_payload"
    state = PipelineState.TRANSFORMING

    def __init__(self, hooks: ModelHooks):
        self.hook = hooks.transform_update_payload

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        if self.hook is None:
            ctx.payload = ctx.raw_data
        else:
            ctx.payload = await resolve_awaitable(self.hook(ctx.raw_data))
        return ctx


class WriteStep(UpdateStep):
    order = 40
    name = "write"
    state = PipelineState.WRITING

    def __init__(self, data_source: ListMutable):
        self.data_source = data_source

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        ctx.result = await resolve_awaitable(
            self.data_source.update(ctx.unique_id, ctx.payload)
        )
        ctx.write_committed = True
        return ctx


class AfterUpdateHookStep(UpdateStep):
    order = 50
    name = "after_update"
    state = PipelineState.AFTER_HOOK

    def __init__(self, hooks: ModelHooks):
        self.hook = hooks.after_update

    def should_run(self, ctx: UpdateContext) -> bool:
        return self.hook is not None

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        await resolve_awaitable(self.hook(ctx.raw_where, ctx.payload))
        return ctx


class UpdatePipeline:
    """
    Executes update steps sequentially, sorted by ``order``.

    Example:
        pipeline = UpdatePipeline([
            ParseWhereStep(where_input),
            TransformPayloadStep(hooks),
            WriteStep(data_source),
        ])
        ctx = await pipeline.execute(UpdateContext(model, where, data))
    """

    def __init__(self, steps: List[UpdateStep]):
        self.steps = sorted(steps, key=lambda s: s.order)

    async def execute(self, ctx: UpdateContext) -> UpdateContext:
        for step in self.steps:
            if not step.should_run(ctx):
                continue
            ctx.transition(step.state)
            logger.debug("Update %s: running %s", ctx.model_name, step.name)
            try:
                ctx = await step.execute(ctx)
            except Exception:
                ctx.transition(PipelineState.FAILED)
                if ctx.write_committed:
                    logger.warning(
                        "Update of %s failed in step '%s' after the write was committed",
                        ctx.model_name,
                        step.name,
                    )
                else:
                    logger.debug(
                        "Update of %s aborted in step '%s'", ctx.model_name, step.name
                    )
                raise
        ctx.transition(PipelineState.DONE)
        return ctx

    def get_step_names(self) -> List[str]:
        """Return step names in execution order."""
        return [s.name for s in self.steps]

    def __repr__(self) -> str:
        return f"<UpdatePipeline steps={self.get_step_names()}>"


def build_update_pipeline(
    where_input: WhereInputProvider,
    data_source: ListMutable,
    hooks: Optional[ModelHooks] = None,
) -> UpdatePipeline:
    """Build the standard update pipeline for one model."""
    hooks = hooks or ModelHooks()
    return UpdatePipeline(
        [
            ParseWhereStep(where_input),
            BeforeUpdateHookStep(hooks),
            TransformPayloadStep(hooks),
            WriteStep(data_source),
            AfterUpdateHookStep(hooks),
        ]
    )
