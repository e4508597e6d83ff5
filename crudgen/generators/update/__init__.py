"""
Update mutation generation.

Exposes the input synthesizer, relation input builder, mutation registrar,
resolver factory and the plugin composing them.
"""

from .inputs import InputTypeSynthesizer
from .mutation import MutationRegistrar
from .pipeline import (
    PipelineState,
    UpdateContext,
    UpdatePipeline,
    UpdateStep,
    build_update_pipeline,
)
from .plugin import UpdatePlugin
from .relations import RelationInputBuilder
from .resolver import ResolverFactory

__all__ = [
    "InputTypeSynthesizer",
    "MutationRegistrar",
    "PipelineState",
    "RelationInputBuilder",
    "ResolverFactory",
    "UpdateContext",
    "UpdatePipeline",
    "UpdatePlugin",
    "UpdateStep",
    "build_update_pipeline",
]
