# mzqclib/config.py
"""Format constants and writer defaults for mzQC documents."""

# Top-level key wrapping the document body
MZQC_ROOT_KEY = "mzQC"

# Schema version written when the caller does not supply one
DEFAULT_MZQC_VERSION = "1.0.0"

# ISO-8601 UTC, second precision (e.g. 2023-01-01T00:00:00Z)
CREATION_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

JSON_INDENT = 2
FILE_ENCODING = "utf-8"

# OBO parsing
OBO_TERM_STANZA = "[Term]"
OBO_COMMENT_PREFIX = "!"
OBO_VALUE_TYPE_PREFIX = "value-type:"
OBO_UNIT_RELATIONSHIP = "has_units"
