"""
Structural validation of mzQC documents.

Key components:
- StructuralValidator: ordered presence checks on the document shape
- SchemaCache: loads each schema file once per cache instance
- ValidationResult / ValidationRule: outcome and the rule that failed
"""

from .schema import (
    SchemaCache,
    StructuralValidator,
    ValidationResult,
    ValidationRule,
    get_default_validator,
    validate_against_schema,
)

__all__ = [
    "SchemaCache",
    "StructuralValidator",
    "ValidationResult",
    "ValidationRule",
    "get_default_validator",
    "validate_against_schema",
]
