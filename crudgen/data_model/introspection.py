"""
Build model descriptors from Django model classes.
"""

import logging
from typing import Dict, Optional, Type

from django.db import models
from django.db.models import ForeignKey, ManyToManyField, OneToOneField

from .fields import Field, ObjectField, RelationField, ScalarField
from .model import Model, ModelRegistry

logger = logging.getLogger(__name__)


# Mapping of Django field types to GraphQL scalar type names
FIELD_TYPE_MAP: Dict[Type[models.Field], str] = {
    models.AutoField: "ID",
    models.BigAutoField: "ID",
    models.SmallAutoField: "ID",
    models.UUIDField: "ID",
    models.BooleanField: "Boolean",
    models.IntegerField: "Int",
    models.BigIntegerField: "Int",
    models.SmallIntegerField: "Int",
    models.PositiveIntegerField: "Int",
    models.PositiveSmallIntegerField: "Int",
    models.PositiveBigIntegerField: "Int",
    models.FloatField: "Float",
    models.DecimalField: "Float",
    models.CharField: "String",
    models.TextField: "String",
    models.EmailField: "String",
    models.SlugField: "String",
    models.URLField: "String",
    models.DateField: "String",
    models.DateTimeField: "String",
    models.TimeField: "String",
    models.DurationField: "String",
}

DEFAULT_SCALAR = "String"


def _scalar_type_name(django_field: models.Field) -> str:
    for klass in type(django_field).__mro__:
        if klass in FIELD_TYPE_MAP:
            return FIELD_TYPE_MAP[klass]
    return DEFAULT_SCALAR


def _is_auto_generated(django_field: models.Field) -> bool:
    return bool(
        django_field.primary_key
        or getattr(django_field, "auto_now", False)
        or getattr(django_field, "auto_now_add", False)
    )


def field_from_django(django_field: models.Field) -> Field:
    """Convert one concrete or many-to-many Django field."""
    if isinstance(django_field, (ForeignKey, OneToOneField)):
        return RelationField(
            name=django_field.name,
            target=django_field.related_model.__name__,
            many=False,
        )
    if isinstance(django_field, ManyToManyField):
        return RelationField(
            name=django_field.name,
            target=django_field.related_model.__name__,
            many=True,
        )
    return ScalarField(
        name=django_field.name,
        type_name=_scalar_type_name(django_field),
        auto_generated=_is_auto_generated(django_field),
    )


def model_from_django(
    model_class: Type[models.Model],
    registry: Optional[ModelRegistry] = None,
    composites: Optional[Dict[str, ObjectField]] = None,
) -> Model:
    """
    Describe a Django model as a :class:`Model`.

    Reverse relations are skipped. ``composites`` replaces the named fields
    (typically ``JSONField`` columns) with composite descriptors so that
    their structure is exposed in generated inputs.

    Args:
        model_class: Django model class
        registry: Optional registry the new model is registered into
        composites: Optional mapping of field name to composite descriptor

    Returns:
        The model descriptor
    """
    composites = composites or {}
    fields = []
    for django_field in model_class._meta.get_fields():
        if django_field.auto_created and not django_field.concrete:
            continue
        if not (django_field.concrete or isinstance(django_field, ManyToManyField)):
            continue
        if django_field.name in composites:
            fields.append(composites[django_field.name])
            continue
        fields.append(field_from_django(django_field))

    model = Model(
        model_class.__name__,
        fields,
        plural=str(model_class._meta.verbose_name_plural).replace(" ", "") or None,
    )
    logger.debug("Introspected Django model %s", model_class._meta.label)
    if registry is not None:
        registry.register(model)
    return model
