"""
Per-model update hooks.

Each model has a fixed bundle of three optional slots. The registry is
filled while the schema is composed and only read while serving requests.
"""

import logging
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

Hook = Callable[..., Any]


@dataclass(frozen=True)
class ModelHooks:
    """
    Hooks around one model's update mutation.

    Attributes:
        before_update: ``(where, data)`` called before the write, result ignored
        transform_update_payload: ``(data) -> data`` replacing the payload
        after_update: ``(where, data)`` called after the write with the
            transformed payload, result ignored

    Any slot may return an awaitable; it is awaited before the pipeline
    continues.
    """

    before_update: Optional[Hook] = None
    transform_update_payload: Optional[Hook] = None
    after_update: Optional[Hook] = None

    @classmethod
    def slot_names(cls) -> tuple:
        return tuple(slot.name for slot in fields(cls))

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in self.slot_names())


EMPTY_HOOKS = ModelHooks()


def _resolve_hook(model_name: str, slot: str, hook: Union[str, Hook, None]) -> Optional[Hook]:
    if hook is None:
        return None
    if callable(hook):
        return hook
    if isinstance(hook, str):
        try:
            return import_string(hook)
        except ImportError as exc:
            raise ImproperlyConfigured(
                f"Cannot import {slot} hook '{hook}' for model '{model_name}': {exc}"
            ) from exc
    raise ImproperlyConfigured(
        f"{slot} hook for model '{model_name}' must be a callable or dotted path"
    )


def build_model_hooks(model_name: str, config: Mapping[str, Any]) -> ModelHooks:
    """Build a hook bundle from a mapping of slot name to callable or dotted path."""
    slots = ModelHooks.slot_names()
    unknown = set(config) - set(slots)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown hook slot(s) {sorted(unknown)} for model '{model_name}'. "
            f"Expected any of {list(slots)}"
        )
    return ModelHooks(
        **{slot: _resolve_hook(model_name, slot, config.get(slot)) for slot in slots}
    )


class HookRegistry:
    """
    Read-only mapping of model name to :class:`ModelHooks`.

    Looking up a model without hooks returns an empty bundle, never ``None``.
    """

    def __init__(self, hooks: Optional[Mapping[str, ModelHooks]] = None):
        self._hooks: Mapping[str, ModelHooks] = MappingProxyType(dict(hooks or {}))

    @classmethod
    def from_config(cls, config: Mapping[str, Mapping[str, Any]]) -> "HookRegistry":
        hooks: Dict[str, ModelHooks] = {}
        for model_name, model_config in (config or {}).items():
            hooks[model_name] = build_model_hooks(model_name, model_config)
            logger.debug(
                "Loaded update hooks for %s: %s",
                model_name,
                [slot for slot in ModelHooks.slot_names() if getattr(hooks[model_name], slot)],
            )
        return cls(hooks)

    @classmethod
    def from_settings(cls, settings: Any = None) -> "HookRegistry":
        """Build the registry from ``UpdateGeneratorSettings.hooks``."""
        if settings is None:
            from ..core.settings import UpdateGeneratorSettings

            settings = UpdateGeneratorSettings.from_settings()
        return cls.from_config(settings.hooks)

    def get(self, model_name: str) -> ModelHooks:
        return self._hooks.get(model_name, EMPTY_HOOKS)

    def __contains__(self, model_name: str) -> bool:
        return model_name in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)
