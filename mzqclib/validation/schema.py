# mzqclib/validation/schema.py
"""
Structural validation of mzQC documents.

This is a presence check on the document shape, not a JSON-Schema
validator: leaf types, enums and patterns are not inspected. The schema
file is only loaded (once per cache) to make sure the referenced artifact
exists and parses.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import FILE_ENCODING, MZQC_ROOT_KEY
from ..errors import SchemaViolation
from ..utils.json_values import reject_constant

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ValidationRule(Enum):
    """Structural rules, in the order they are checked."""

    SCHEMA = "schema"
    ROOT = "root"
    REQUIRED_PROPERTIES = "required_properties"
    QUALITIES = "qualities"
    CONTROLLED_VOCABULARIES = "controlled_vocabularies"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: pass, or the first rule that failed and why."""

    valid: bool
    rule: Optional[ValidationRule] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_failure(self) -> None:
        """Raise SchemaViolation if the document failed validation."""
        if not self.valid:
            raise SchemaViolation(self.rule, self.reason)

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failed(cls, rule: ValidationRule, reason: str) -> "ValidationResult":
        return cls(valid=False, rule=rule, reason=reason)


class SchemaCache:
    """Loads schema documents by path and keeps them for the cache's lifetime."""

    def __init__(self):
        self._schemas: Dict[str, Any] = {}

    def get(self, schema_path: PathLike) -> Any:
        """
        Return the parsed schema at schema_path, reading it only on first use.

        Raises:
            OSError: If the schema file cannot be opened.
            ValueError: If the schema file is not valid JSON.
        """
        key = str(schema_path)
        if key not in self._schemas:
            with open(key, "r", encoding=FILE_ENCODING) as f:
                self._schemas[key] = json.load(f, parse_constant=reject_constant)
            logger.debug(f"Loaded schema from {key}")
        return self._schemas[key]

    def clear(self) -> None:
        self._schemas.clear()

    def __contains__(self, schema_path: PathLike) -> bool:
        return str(schema_path) in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


class StructuralValidator:
    """Checks the presence rules of the mzQC document shape."""

    def __init__(self, cache: Optional[SchemaCache] = None):
        self.cache = cache if cache is not None else SchemaCache()

    def validate(self, data: Any, schema_path: PathLike) -> ValidationResult:
        """
        Validate a parsed JSON value.

        Rules are checked in order and the first failing one is reported:

        1. a top-level "mzQC" object exists;
        2. it has both "version" and "creationDate";
        3. it has "runQualities" or "setQualities" (empty arrays count);
        4. it has "controlledVocabularies".

        Args:
            data: Parsed JSON value (wrapped form).
            schema_path: Path of the mzQC schema file.

        Returns:
            ValidationResult describing the outcome.
        """
        try:
            self.cache.get(schema_path)
        except (OSError, ValueError) as e:
            return self._fail(
                ValidationRule.SCHEMA, f"could not load schema file {schema_path}: {e}"
            )

        if not isinstance(data, dict) or not isinstance(data.get(MZQC_ROOT_KEY), dict):
            return self._fail(
                ValidationRule.ROOT, f"missing root '{MZQC_ROOT_KEY}' object"
            )

        body = data[MZQC_ROOT_KEY]

        if "version" not in body or "creationDate" not in body:
            return self._fail(
                ValidationRule.REQUIRED_PROPERTIES,
                "missing required properties 'version' and 'creationDate' "
                f"in {MZQC_ROOT_KEY} object",
            )

        if "runQualities" not in body and "setQualities" not in body:
            return self._fail(
                ValidationRule.QUALITIES,
                "either runQualities or setQualities must be present",
            )

        if "controlledVocabularies" not in body:
            return self._fail(
                ValidationRule.CONTROLLED_VOCABULARIES,
                "controlledVocabularies must be present",
            )

        return ValidationResult.passed()

    @staticmethod
    def _fail(rule: ValidationRule, reason: str) -> ValidationResult:
        logger.warning(f"Schema validation error: {reason}")
        return ValidationResult.failed(rule, reason)


# Default validator used when callers do not supply their own
_default_validator = StructuralValidator()


def get_default_validator() -> StructuralValidator:
    return _default_validator


def validate_against_schema(
    data: Any, schema_path: PathLike, validator: Optional[StructuralValidator] = None
) -> ValidationResult:
    """Validate data with the given validator, or the default one."""
    return (validator or _default_validator).validate(data, schema_path)
