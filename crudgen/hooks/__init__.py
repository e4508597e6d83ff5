from .registry import EMPTY_HOOKS, HookRegistry, ModelHooks, build_model_hooks

__all__ = ["EMPTY_HOOKS", "HookRegistry", "ModelHooks", "build_model_hooks"]
