"""
Unit tests for model and field descriptors.
"""

import pytest

from crudgen.data_model import (
    Cardinality,
    FieldKind,
    Model,
    ModelRegistry,
    Namings,
    ObjectField,
    RelationField,
    ScalarField,
    pluralize,
)
from crudgen.data_model.introspection import model_from_django
from tests.fakes import build_blog_registry

pytestmark = pytest.mark.unit


class TestNamings:
    @pytest.mark.parametrize(
        "word,expected",
        [("post", "posts"), ("category", "categories"), ("box", "boxes"), ("day", "days")],
    )
    def test_pluralize(self, word, expected):
        assert pluralize(word) == expected

    def test_from_name(self):
        namings = Namings.from_name("blogPost")

        assert namings.singular == "blogPost"
        assert namings.plural == "blogPosts"
        assert namings.capital_singular == "BlogPost"
        assert namings.capital_plural == "BlogPosts"


class TestFields:
    def test_kinds(self):
        assert ScalarField("a", "String").kind is FieldKind.SCALAR
        assert ObjectField("b", "B").kind is FieldKind.OBJECT
        assert RelationField("c", target="C").kind is FieldKind.RELATION

    def test_only_scalars_are_scalar(self):
        assert ScalarField("a", "String").is_scalar()
        assert not ObjectField("b", "B").is_scalar()
        assert not RelationField("c", target="C").is_scalar()

    def test_relation_cardinality_follows_list_flag(self):
        assert RelationField("c", target="C").cardinality is Cardinality.TO_ONE
        assert RelationField("c", target="C", many=True).cardinality is Cardinality.TO_MANY
        assert RelationField("c", target="C", many=True).is_list()

    def test_relation_type_name_defaults_to_target(self):
        assert RelationField("author", target="User").type_name == "User"

    def test_relation_requires_target(self):
        with pytest.raises(ValueError):
            RelationField("orphan")

    def test_unbound_relation_lookup_fails(self):
        with pytest.raises(LookupError):
            RelationField("author", target="User").get_relation_to()


class TestModelRegistry:
    def test_relation_targets_resolve_by_name(self):
        registry = build_blog_registry()
        post = registry.get("Post")

        assert post.get_field("author").get_relation_to() is registry.get("User")
        assert post.get_field("tags").get_relation_to() is registry.get("Tag")

    def test_target_may_be_registered_later(self):
        registry = ModelRegistry()
        post = registry.register(Model("Post", [RelationField("author", target="User")]))
        user = registry.register(Model("User"))

        assert post.get_field("author").get_relation_to() is user

    def test_unknown_target(self):
        registry = ModelRegistry()
        post = registry.register(Model("Post", [RelationField("author", target="User")]))

        with pytest.raises(LookupError):
            post.get_field("author").get_relation_to()

    def test_duplicate_model_rejected(self):
        registry = ModelRegistry([Model("Post")])

        with pytest.raises(ValueError):
            registry.register(Model("Post"))

    def test_duplicate_field_rejected(self):
        with pytest.raises(ValueError):
            Model("Post", [ScalarField("title", "String"), ScalarField("title", "String")])


class TestDjangoIntrospection:
    def test_post_fields(self):
        from tests.models import Post

        registry = ModelRegistry()
        model = model_from_django(Post, registry)
        fields = model.get_fields()

        assert "Post" in registry
        assert fields["id"].auto_generated
        assert fields["created_at"].auto_generated
        assert fields["updated_at"].auto_generated
        assert fields["title"].type_name == "String"
        assert fields["views"].type_name == "Int"
        assert fields["locked"].type_name == "Boolean"
        assert fields["author"].cardinality is Cardinality.TO_ONE
        assert fields["author"].target == "Author"
        assert fields["tags"].cardinality is Cardinality.TO_MANY
        assert fields["tags"].target == "Tag"

    def test_reverse_relations_are_skipped(self):
        from tests.models import Author

        model = model_from_django(Author)

        assert list(model.get_fields()) == ["id", "name", "email"]

    def test_composite_override(self):
        from tests.models import Post

        address = ObjectField(
            "address", "Address", fields={"city": ScalarField("city", "String")}
        )
        model = model_from_django(Post, composites={"address": address})

        assert model.get_field("address") is address
