"""
crudgen - update-mutation contributor for a pluggable GraphQL CRUD generator.
"""

__version__ = "0.1.0"
