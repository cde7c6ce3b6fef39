"""Constants for the jsoninfer package."""

# Type tags recorded on statistics nodes
NULL = "null"
BOOLEAN = "boolean"
INTEGER = "integer"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"

DRAFT_URIS = {
    "2020-12": "https://json-schema.org/draft/2020-12/schema",
    "2019-09": "https://json-schema.org/draft/2019-09/schema",
    "07": "http://json-schema.org/draft-07/schema#",
}

DEFAULT_MAX_UNIQUE_VALUES = 50
DEFAULT_MAX_EXAMPLES = 3
DEFAULT_ENUM_THRESHOLD = 8
# Each nesting level costs a few interpreter frames in the collector,
# renderer and canonicalizer.
DEFAULT_MAX_DEPTH = 128
