from .django_orm import DjangoModelStorage

__all__ = ["DjangoModelStorage"]
