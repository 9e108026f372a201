"""
Property names of the Schema object, as they appear in JSON documents and
in schema annotations.
"""

PROP_NAME = "name"
PROP_REF = "$ref"
PROP_TITLE = "title"
PROP_DESCRIPTION = "description"
PROP_FORMAT = "format"
PROP_TYPE = "type"
PROP_DEFAULT = "default"
PROP_EXAMPLE = "example"

PROP_MULTIPLE_OF = "multipleOf"
PROP_MAXIMUM = "maximum"
PROP_EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
PROP_MINIMUM = "minimum"
PROP_EXCLUSIVE_MINIMUM = "exclusiveMinimum"
PROP_MAX_LENGTH = "maxLength"
PROP_MIN_LENGTH = "minLength"
PROP_PATTERN = "pattern"
PROP_MAX_ITEMS = "maxItems"
PROP_MIN_ITEMS = "minItems"
PROP_UNIQUE_ITEMS = "uniqueItems"
PROP_MAX_PROPERTIES = "maxProperties"
PROP_MIN_PROPERTIES = "minProperties"

PROP_REQUIRED = "required"
PROP_ENUM = "enum"
PROP_ITEMS = "items"
PROP_NOT = "not"
PROP_ALL_OF = "allOf"
PROP_ONE_OF = "oneOf"
PROP_ANY_OF = "anyOf"
PROP_PROPERTIES = "properties"
PROP_ADDITIONAL_PROPERTIES = "additionalProperties"

PROP_READ_ONLY = "readOnly"
PROP_WRITE_ONLY = "writeOnly"
PROP_NULLABLE = "nullable"
PROP_DEPRECATED = "deprecated"
PROP_XML = "xml"
PROP_EXTERNAL_DOCS = "externalDocs"
PROP_DISCRIMINATOR = "discriminator"

# Annotation-only attribute names
ANN_REQUIRED_PROPERTIES = "requiredProperties"
ANN_ENUMERATION = "enumeration"
ANN_DEFAULT_VALUE = "defaultValue"
ANN_IMPLEMENTATION = "implementation"
ANN_HIDDEN = "hidden"
ANN_DISCRIMINATOR_PROPERTY = "discriminatorProperty"
ANN_DISCRIMINATOR_MAPPING = "discriminatorMapping"
ANN_EXTENSIONS = "extensions"
