"""
Tests for document loading and reading the petstore fixture end to end.
"""

from decimal import Decimal
from pathlib import Path
from unittest import TestCase

from openapi_schema_reader.config import ReaderConfig
from openapi_schema_reader.models import SchemaType
from openapi_schema_reader.readers import load_document, read_document_schemas, resolve_pointer

PETSTORE = Path(__file__).parent / "test_data" / "petstore.json"


class TestResolvePointer(TestCase):
    def test_root(self):
        doc = {"a": 1}
        self.assertIs(resolve_pointer(doc, ""), doc)
        self.assertIs(resolve_pointer(doc, "#"), doc)

    def test_nested(self):
        doc = {"a": {"b/c": {"~d": [10, 20]}}}
        self.assertEqual(resolve_pointer(doc, "/a/b~1c/~0d/1"), 20)
        self.assertEqual(resolve_pointer(doc, "#/a/b~1c/~0d/0"), 10)

    def test_empty_tokens(self):
        doc = {"": {"a": 1}, "a": 2}
        self.assertEqual(resolve_pointer(doc, "/"), {"a": 1})
        self.assertEqual(resolve_pointer(doc, "//a"), 1)
        self.assertEqual(resolve_pointer(doc, "#//a"), 1)

    def test_missing(self):
        doc = {"a": [1]}
        self.assertIsNone(resolve_pointer(doc, "/b"))
        self.assertIsNone(resolve_pointer(doc, "/a/5"))
        self.assertIsNone(resolve_pointer(doc, "/a/x"))

    def test_malformed(self):
        self.assertIsNone(resolve_pointer({"a": 1}, "a"))


class TestPetstore(TestCase):
    def setUp(self):
        self.document = load_document(PETSTORE)
        self.schemas = read_document_schemas(self.document, ReaderConfig())

    def test_schema_names_in_order(self):
        self.assertEqual(list(self.schemas), ["Pet", "Cat", "Tag"])

    def test_pet(self):
        pet = self.schemas["Pet"]
        self.assertIs(pet.type, SchemaType.OBJECT)
        self.assertEqual(pet.required, ["id", "name"])
        self.assertEqual(list(pet.properties), ["id", "name", "petType", "weight", "tags", "attributes"])
        self.assertEqual(pet.properties["id"].format, "int64")
        self.assertEqual(pet.properties["name"].example, "Rex")
        self.assertEqual(pet.properties["petType"].enumeration, ["cat", "dog"])
        self.assertEqual(pet.discriminator.mapping, {"cat": "#/components/schemas/Cat"})
        self.assertEqual(pet.extensions, {"x-entity": "pet"})

    def test_decimals_are_exact(self):
        weight = self.schemas["Pet"].properties["weight"]
        self.assertEqual(weight.multiple_of, Decimal("0.01"))
        self.assertIs(weight.exclusive_minimum, True)

    def test_nested_schemas(self):
        pet = self.schemas["Pet"]
        self.assertEqual(pet.properties["tags"].items.ref, "#/components/schemas/Tag")
        self.assertIs(pet.properties["attributes"].additional_properties_schema.type, SchemaType.STRING)

        cat = self.schemas["Cat"]
        self.assertEqual(cat.all_of[0].ref, "#/components/schemas/Pet")
        self.assertIs(cat.all_of[1].properties["indoor"].default_value, True)

    def test_tag(self):
        tag = self.schemas["Tag"]
        self.assertIs(tag.additional_properties_boolean, False)
        self.assertEqual(tag.xml.name, "tag")
        self.assertIs(tag.xml.wrapped, False)
        self.assertEqual(tag.external_docs.url, "https://example.com/tags")
        self.assertIs(tag.properties["label"].nullable, True)

    def test_single_schema(self):
        config = ReaderConfig(schemas_pointer="/components/schemas/Tag", single_schema=True)
        schemas = read_document_schemas(self.document, config)
        self.assertEqual(list(schemas), ["Tag"])
        self.assertIs(schemas["Tag"].type, SchemaType.OBJECT)

    def test_single_schema_at_root(self):
        config = ReaderConfig(schemas_pointer="#", single_schema=True)
        schemas = read_document_schemas({"type": "string"}, config)
        self.assertEqual(list(schemas), ["schema"])
        self.assertIs(schemas["schema"].type, SchemaType.STRING)

    def test_single_schema_escaped_name(self):
        config = ReaderConfig(schemas_pointer="/defs/a~1b", single_schema=True)
        schemas = read_document_schemas({"defs": {"a/b": {"type": "integer"}}}, config)
        self.assertEqual(list(schemas), ["a/b"])

    def test_missing_pointer(self):
        self.assertIsNone(read_document_schemas(self.document, ReaderConfig(schemas_pointer="/definitions")))
        config = ReaderConfig(schemas_pointer="/definitions/X", single_schema=True)
        self.assertIsNone(read_document_schemas(self.document, config))
