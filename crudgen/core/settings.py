"""
UpdateGeneratorSettings implementation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.conf import settings as django_settings

from ..defaults import LIBRARY_DEFAULTS, merge_settings


def _get_project_settings() -> dict[str, Any]:
    """Get the ``CRUDGEN`` dict from Django settings."""
    project = getattr(django_settings, "CRUDGEN", None) or {}
    if not isinstance(project, dict):
        return {}
    return project


@dataclass
class UpdateGeneratorSettings:
    """Settings for controlling update mutation generation."""

    generate_update: bool = True
    excluded_models: List[str] = field(default_factory=list)
    hooks: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def is_model_excluded(self, model_name: str) -> bool:
        return model_name in self.excluded_models

    @classmethod
    def from_settings(
        cls, overrides: Optional[dict[str, Any]] = None
    ) -> "UpdateGeneratorSettings":
        defaults = LIBRARY_DEFAULTS.get("update_settings", {})
        project = _get_project_settings().get("update_settings", {})
        merged = merge_settings(merge_settings(defaults, project), overrides or {})
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})
