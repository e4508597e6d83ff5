"""
Unit tests for update input synthesis.
"""

import pytest
from graphql import validate_schema

from crudgen.data_model import Model, ModelRegistry, ObjectField, RelationField, ScalarField
from crudgen.generators.update import InputTypeSynthesizer, RelationInputBuilder
from crudgen.schema import SchemaRoot
from tests.fakes import FakeCreateInput, FakeWhereInput, build_blog_registry

pytestmark = pytest.mark.unit


def _synthesizer():
    return InputTypeSynthesizer(RelationInputBuilder(FakeCreateInput(), FakeWhereInput()))


class TestScalarFields:
    def test_scalar_only_model_keeps_fields_and_types(self):
        model = Model(
            "Book",
            [
                ScalarField("title", "String"),
                ScalarField("pages", "Int"),
                ScalarField("price", "Float"),
            ],
        )
        root = SchemaRoot()

        name = _synthesizer().generate_update_input(model, root)

        assert name == "BookUpdateInput"
        definition = root.get_input("BookUpdateInput")
        assert definition.field_names() == ["title", "pages", "price"]
        assert definition.get_field_type("pages") == "Int"
        assert definition.get_field_type("price") == "Float"

    def test_list_scalar_is_wrapped(self):
        root = SchemaRoot()
        _synthesizer().generate_update_input(build_blog_registry().get("Post"), root)

        assert root.get_input("PostUpdateInput").get_field_type("keywords") == "[String]"

    def test_declaration_order_is_preserved(self):
        model = Model("Note", [ScalarField("z", "String"), ScalarField("a", "String")])
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert root.get_input("NoteUpdateInput").field_names() == ["z", "a"]

    def test_lowercase_model_name_is_capitalized(self):
        model = Model("article", [ScalarField("title", "String")])
        root = SchemaRoot()

        assert _synthesizer().generate_update_input(model, root) == "ArticleUpdateInput"


class TestAutoGeneratedFields:
    def test_top_level_auto_generated_fields_are_skipped(self):
        root = SchemaRoot()
        _synthesizer().generate_update_input(build_blog_registry().get("Post"), root)

        names = root.get_input("PostUpdateInput").field_names()
        assert "id" not in names
        assert "updatedAt" not in names

    def test_nested_auto_generated_fields_are_skipped(self):
        model = Model(
            "Shop",
            [
                ObjectField(
                    "profile",
                    "Profile",
                    fields={
                        "slug": ScalarField("slug", "String", auto_generated=True),
                        "bio": ScalarField("bio", "String"),
                        "stats": ObjectField(
                            "stats",
                            "Stats",
                            fields={
                                "computedAt": ScalarField(
                                    "computedAt", "String", auto_generated=True
                                ),
                                "visits": ScalarField("visits", "Int"),
                            },
                        ),
                    },
                )
            ],
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert root.get_input("ShopProfileUpdateInput").field_names() == ["bio", "stats"]
        assert root.get_input("ShopProfileStatsUpdateInput").field_names() == ["visits"]

    def test_auto_generated_composite_is_skipped_entirely(self):
        model = Model(
            "Shop",
            [
                ScalarField("name", "String"),
                ObjectField(
                    "audit",
                    "Audit",
                    auto_generated=True,
                    fields={"by": ScalarField("by", "String")},
                ),
            ],
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert not root.has_input("ShopAuditUpdateInput")
        assert root.get_input("ShopUpdateInput").field_names() == ["name"]


class TestCompositeFields:
    def test_address_composite_yields_nested_input(self):
        root = SchemaRoot()
        _synthesizer().generate_update_input(build_blog_registry().get("Post"), root)

        nested = root.get_input("PostAddressUpdateInput")
        assert nested.field_names() == ["street", "city"]
        assert nested.get_field_type("city") == "String"
        assert (
            root.get_input("PostUpdateInput").get_field_type("address")
            == "PostAddressUpdateInput"
        )

    def test_nested_prefix_accumulates(self):
        model = Model(
            "Company",
            [
                ObjectField(
                    "office",
                    "Office",
                    fields={
                        "location": ObjectField(
                            "location",
                            "Location",
                            fields={"lat": ScalarField("lat", "Float")},
                        )
                    },
                )
            ],
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert (
            root.get_input("CompanyOfficeUpdateInput").get_field_type("location")
            == "CompanyOfficeLocationUpdateInput"
        )
        assert root.get_input("CompanyOfficeLocationUpdateInput").field_names() == ["lat"]

    def test_nested_inputs_are_registered_before_parent(self):
        root = SchemaRoot()
        _synthesizer().generate_update_input(build_blog_registry().get("Post"), root)

        names = [definition.name for definition in root.inputs]
        assert names.index("PostAddressUpdateInput") < names.index("PostUpdateInput")
        assert names[-1] == "PostUpdateInput"

    def test_list_composite_is_wrapped(self):
        model = Model(
            "Order",
            [
                ObjectField(
                    "lines",
                    "Line",
                    many=True,
                    fields={"sku": ScalarField("sku", "String")},
                )
            ],
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert root.get_input("OrderUpdateInput").get_field_type("lines") == "[OrderLinesUpdateInput]"

    def test_relation_inside_composite_is_dropped(self):
        registry = ModelRegistry()
        registry.register(Model("User", [ScalarField("name", "String")]))
        model = registry.register(
            Model(
                "Post",
                [
                    ObjectField(
                        "meta",
                        "Meta",
                        fields={
                            "note": ScalarField("note", "String"),
                            "reviewer": RelationField("reviewer", target="User"),
                        },
                    )
                ],
            )
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert root.get_input("PostMetaUpdateInput").field_names() == ["note"]
        assert not root.has_input("PostUpdateOneInput")


class TestRelationFields:
    def test_relations_reference_relation_inputs(self):
        root = SchemaRoot()
        _synthesizer().generate_update_input(build_blog_registry().get("Post"), root)

        definition = root.get_input("PostUpdateInput")
        assert definition.get_field_type("author") == "PostUpdateOneInput"
        assert definition.get_field_type("tags") == "PostUpdateManyInput"


class TestEmptyInputs:
    def test_composite_with_only_relations_is_dropped(self):
        registry = ModelRegistry()
        registry.register(Model("User", [ScalarField("name", "String")]))
        model = registry.register(
            Model(
                "Post",
                [
                    ScalarField("title", "String"),
                    ObjectField(
                        "meta",
                        "Meta",
                        fields={"reviewer": RelationField("reviewer", target="User")},
                    ),
                ],
            )
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert not root.has_input("PostMetaUpdateInput")
        assert root.get_input("PostUpdateInput").field_names() == ["title"]

    def test_composite_with_only_auto_generated_fields_is_dropped(self):
        model = Model(
            "Shop",
            [
                ScalarField("name", "String"),
                ObjectField(
                    "stamps",
                    "Stamps",
                    fields={
                        "createdAt": ScalarField("createdAt", "String", auto_generated=True),
                        "inner": ObjectField(
                            "inner",
                            "Inner",
                            fields={"at": ScalarField("at", "String", auto_generated=True)},
                        ),
                    },
                ),
            ],
        )
        root = SchemaRoot()
        _synthesizer().generate_update_input(model, root)

        assert [definition.name for definition in root.inputs] == ["ShopUpdateInput"]
        assert root.get_input("ShopUpdateInput").field_names() == ["name"]

    def test_model_without_writable_fields_registers_nothing(self):
        model = Model(
            "Counter",
            [
                ScalarField("id", "ID", auto_generated=True),
                ObjectField(
                    "meta", "Meta", fields={"at": ScalarField("at", "String", auto_generated=True)}
                ),
            ],
        )
        root = SchemaRoot()
        synthesizer = _synthesizer()

        assert synthesizer.generate_update_input(model, root) is None
        assert root.inputs == []
        assert not synthesizer.has_writable_fields(model)

    def test_rendered_schema_passes_validation(self):
        registry = ModelRegistry()
        registry.register(Model("User", [ScalarField("name", "String")]))
        model = registry.register(
            Model(
                "Post",
                [
                    ScalarField("title", "String"),
                    ObjectField(
                        "meta",
                        "Meta",
                        fields={"reviewer": RelationField("reviewer", target="User")},
                    ),
                ],
            )
        )
        root = SchemaRoot()
        root.add_type("type Post { title: String }")
        root.add_query("post: Post")
        _synthesizer().generate_update_input(model, root)

        assert validate_schema(root.build_schema()) == []
