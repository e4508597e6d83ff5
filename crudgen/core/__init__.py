from .settings import UpdateGeneratorSettings

__all__ = ["UpdateGeneratorSettings"]
