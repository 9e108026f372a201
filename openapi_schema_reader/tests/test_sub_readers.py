"""
Tests for the discriminator, XML, external docs and extensions readers.
"""

import unittest

from openapi_schema_reader.errors import SchemaFormatError
from openapi_schema_reader.models import XML, Discriminator, ExternalDocumentation, Schema
from openapi_schema_reader.readers import AnnotationInstance, AnnotationValue
from openapi_schema_reader.readers.discriminator import read_discriminator
from openapi_schema_reader.readers.extensions import read_extensions, read_extensions_annotation
from openapi_schema_reader.readers.external_docs import read_external_docs, read_external_docs_annotation
from openapi_schema_reader.readers.xml_metadata import read_xml


class TestDiscriminator(unittest.TestCase):
    def test_absent(self):
        self.assertIsNone(read_discriminator(None))
        self.assertIsNone(read_discriminator("kind"))

    def test_mapping(self):
        discriminator = read_discriminator({"propertyName": "kind", "mapping": {"a": "#/A", "b": "#/B"}})
        self.assertEqual(discriminator, Discriminator(property_name="kind", mapping={"a": "#/A", "b": "#/B"}))
        self.assertEqual(list(discriminator.mapping), ["a", "b"])

    def test_mapping_not_an_object(self):
        self.assertIsNone(read_discriminator({"propertyName": "kind", "mapping": ["a"]}).mapping)


class TestXml(unittest.TestCase):
    def test_absent(self):
        self.assertIsNone(read_xml(None))

    def test_fields(self):
        xml = read_xml({"name": "pet", "namespace": "urn:pets", "prefix": "p", "attribute": False, "x-a": 1})
        self.assertEqual(xml.name, "pet")
        self.assertEqual(xml.namespace, "urn:pets")
        self.assertEqual(xml.prefix, "p")
        self.assertIs(xml.attribute, False)
        self.assertIsNone(xml.wrapped)
        self.assertEqual(xml.extensions, {"x-a": 1})

    def test_malformed_flag(self):
        with self.assertRaises(SchemaFormatError):
            read_xml({"wrapped": "sometimes"})


class TestExternalDocs(unittest.TestCase):
    def test_json(self):
        self.assertIsNone(read_external_docs([]))
        docs = read_external_docs({"description": "More", "url": "https://example.com"})
        self.assertEqual(docs, ExternalDocumentation(description="More", url="https://example.com"))

    def test_annotation(self):
        self.assertIsNone(read_external_docs_annotation(None))
        docs = read_external_docs_annotation(
            AnnotationInstance("ExternalDocumentation", {"description": "More", "url": "https://example.com"})
        )
        self.assertEqual(docs, ExternalDocumentation(description="More", url="https://example.com"))


class TestExtensions(unittest.TestCase):
    def test_only_x_fields(self):
        schema = Schema()
        read_extensions({"type": "string", "x-one": 1, "X-Two": [2], "description": "d"}, schema)
        self.assertEqual(schema.extensions, {"x-one": 1, "X-Two": [2]})

    def test_no_extensions_keeps_none(self):
        schema = Schema()
        read_extensions({"type": "string"}, schema)
        self.assertIsNone(schema.extensions)

    def test_annotation_parse_value(self):
        schema = Schema()
        value = AnnotationValue(
            "extensions",
            [
                AnnotationInstance("Extension", {"name": "x-json", "value": '{"a": [1, 2]}', "parseValue": True}),
                AnnotationInstance("Extension", {"name": "x-text", "value": '{"a"', "parseValue": False}),
                AnnotationInstance("Extension", {"value": "nameless"}),
            ],
        )
        read_extensions_annotation(value, schema)
        self.assertEqual(schema.extensions, {"x-json": {"a": [1, 2]}, "x-text": '{"a"'})

    def test_annotation_malformed_json(self):
        value = AnnotationValue("extensions", [AnnotationInstance("Extension", {"name": "x-bad", "value": "{", "parseValue": True})])
        with self.assertRaises(SchemaFormatError):
            read_extensions_annotation(value, Schema())


if __name__ == "__main__":
    unittest.main()
