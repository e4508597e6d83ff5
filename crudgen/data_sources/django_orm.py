"""
Django ORM storage collaborator for update mutations.

Applies an update payload to one record inside a database transaction:
scalar fields are assigned, composite (JSON) patches are merged and relation
operations are translated to foreign key assignments and many-to-many
manager calls.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from asgiref.sync import sync_to_async
from django.core.exceptions import FieldDoesNotExist, ObjectDoesNotExist
from django.db import IntegrityError, models, transaction

from ..exceptions import RecordNotFound, StorageError

logger = logging.getLogger(__name__)


def merge_composite(current: Any, patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge a composite patch into the stored value."""
    merged = dict(current) if isinstance(current, dict) else {}
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_composite(merged[key], value)
        else:
            merged[key] = value
    return merged


class DjangoModelStorage:
    """
    Storage for one Django model.

    ``update`` takes the unique lookup produced by the where-input
    collaborator (keyword arguments for ``QuerySet.get``) and a payload shaped
    like the synthesized update input.

    Example:
        storage = DjangoModelStorage(Post)
        post = await storage.update({"pk": 1}, {"title": "Hello"})
    """

    def __init__(self, model_class: Type[models.Model]):
        self.model_class = model_class

    @property
    def model_name(self) -> str:
        return self.model_class.__name__

    async def update(self, unique_id: Mapping[str, Any], payload: Mapping[str, Any]):
        return await sync_to_async(self.update_sync, thread_sensitive=True)(
            unique_id, payload
        )

    def update_sync(self, unique_id: Mapping[str, Any], payload: Mapping[str, Any]):
        try:
            with transaction.atomic():
                instance = self._get(self.model_class, unique_id)
                to_many: List[tuple] = []
                deferred_deletes: List[models.Model] = []

                for name, value in (payload or {}).items():
                    field = self._get_field(name)
                    if field.many_to_many:
                        to_many.append((field, value))
                    elif field.many_to_one or field.one_to_one:
                        deferred_deletes.extend(self._apply_to_one(instance, field, value))
                    elif isinstance(field, models.JSONField) and isinstance(value, dict):
                        setattr(instance, name, merge_composite(getattr(instance, name), value))
                    else:
                        setattr(instance, name, value)

                instance.save()

                for related in deferred_deletes:
                    related.delete()
                for field, value in to_many:
                    self._apply_to_many(instance, field, value)
        except IntegrityError as exc:
            raise StorageError(
                f"Failed to update {self.model_name}: {exc}", self.model_name
            ) from exc

        logger.debug("Updated %s %s", self.model_name, instance.pk)
        return instance

    def _get_field(self, name: str) -> models.Field:
        try:
            return self.model_class._meta.get_field(name)
        except FieldDoesNotExist as exc:
            raise StorageError(
                f"{self.model_name} has no field '{name}'", self.model_name
            ) from exc

    @staticmethod
    def _get(
        model_class: Type[models.Model],
        lookup: Mapping[str, Any],
        manager: Optional[models.Manager] = None,
    ) -> models.Model:
        """
        Fetch one record, raising RecordNotFound when nothing matches.

        Args:
            model_class: Model class the lookup targets
            lookup: Keyword arguments for ``get``
            manager: Optional manager narrowing the search, such as the
                related manager of a to-many relation

        Returns:
            The matching record
        """
        source = manager if manager is not None else model_class._default_manager
        try:
            return source.get(**lookup)
        except ObjectDoesNotExist as exc:
            raise RecordNotFound(
                f"{model_class.__name__} matching {dict(lookup)} not found",
                model_class.__name__,
                lookup=dict(lookup),
            ) from exc

    def _apply_to_one(
        self, instance: models.Model, field: models.Field, operations: Mapping[str, Any]
    ) -> List[models.Model]:
        """Apply to-one operations, returning records to delete after saving."""
        if not operations:
            return []
        related_model = field.related_model
        to_delete: List[models.Model] = []

        if operations.get("delete"):
            current = getattr(instance, field.name)
            if current is not None:
                to_delete.append(current)
            setattr(instance, field.name, None)
        if operations.get("disconnect"):
            setattr(instance, field.name, None)
        if operations.get("connect") is not None:
            setattr(instance, field.name, self._get(related_model, operations["connect"]))
        if operations.get("create") is not None:
            created = related_model._default_manager.create(**operations["create"])
            setattr(instance, field.name, created)
        return to_delete

    def _apply_to_many(
        self, instance: models.Model, field: models.Field, operations: Mapping[str, Any]
    ) -> None:
        if not operations:
            return
        manager = getattr(instance, field.name)
        related_model = field.related_model

        for lookup in operations.get("delete") or []:
            # Only records linked to this instance may be deleted through it.
            self._get(related_model, lookup, manager=manager).delete()
        disconnect = self._lookup_all(related_model, operations.get("disconnect"))
        if disconnect:
            manager.remove(*disconnect)
        connect = self._lookup_all(related_model, operations.get("connect"))
        if connect:
            manager.add(*connect)
        for data in operations.get("create") or []:
            manager.create(**data)

    def _lookup_all(
        self, model_class: Type[models.Model], lookups: Iterable[Mapping[str, Any]]
    ) -> List[models.Model]:
        return [self._get(model_class, lookup) for lookup in lookups or []]
