# mzqclib/model/document.py
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from ..config import (
    CREATION_DATE_FORMAT,
    DEFAULT_MZQC_VERSION,
    FILE_ENCODING,
    JSON_INDENT,
    MZQC_ROOT_KEY,
)
from ..core.base import JsonSerializable, as_object, get_list, get_str, put_if_set
from ..errors import MzQCIOError, ParseError
from ..utils.json_values import reject_constant
from ..validation.schema import StructuralValidator, validate_against_schema
from .quality import RunQuality, SetQuality
from .values import ControlledVocabulary, QualityMetric

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def current_iso_time() -> str:
    """Return the current UTC time as YYYY-MM-DDTHH:MM:SSZ."""
    return datetime.now(timezone.utc).strftime(CREATION_DATE_FORMAT)


@dataclass
class MzQCFile(JsonSerializable):
    """
    Root of an mzQC document.

    An empty creation_date is replaced by the current UTC time, both when
    the object is constructed and when a document without a creationDate
    is loaded, so an in-memory document always carries one.
    """

    creation_date: str = ""
    version: str = DEFAULT_MZQC_VERSION
    contact_name: str = ""
    contact_address: str = ""
    description: str = ""
    run_qualities: List[RunQuality] = field(default_factory=list)
    set_qualities: List[SetQuality] = field(default_factory=list)
    controlled_vocabularies: List[ControlledVocabulary] = field(default_factory=list)

    def __post_init__(self):
        if not self.creation_date:
            self.creation_date = current_iso_time()

    def to_json(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "version": self.version,
            "creationDate": self.creation_date,
        }
        put_if_set(body, "contactName", self.contact_name)
        put_if_set(body, "contactAddress", self.contact_address)
        put_if_set(body, "description", self.description)

        if self.controlled_vocabularies:
            body["controlledVocabularies"] = [
                cv.to_json() for cv in self.controlled_vocabularies
            ]
        if self.run_qualities:
            body["runQualities"] = [rq.to_json() for rq in self.run_qualities]
        if self.set_qualities:
            body["setQualities"] = [sq.to_json() for sq in self.set_qualities]

        return {MZQC_ROOT_KEY: body}

    @classmethod
    def from_json(cls, data: Any) -> "MzQCFile":
        """
        Build a document from its parsed JSON value.

        Accepts either the wrapped form ({"mzQC": {...}}) or the document
        body directly.
        """
        data = as_object(data)
        body = as_object(data[MZQC_ROOT_KEY]) if MZQC_ROOT_KEY in data else data

        return cls(
            # Empty or missing creationDate is filled in by __post_init__
            creation_date=get_str(body, "creationDate"),
            version=get_str(body, "version"),
            contact_name=get_str(body, "contactName"),
            contact_address=get_str(body, "contactAddress"),
            description=get_str(body, "description"),
            run_qualities=get_list(body, "runQualities", RunQuality.from_json),
            set_qualities=get_list(body, "setQualities", SetQuality.from_json),
            controlled_vocabularies=get_list(
                body, "controlledVocabularies", ControlledVocabulary.from_json
            ),
        )

    @classmethod
    def from_string(
        cls,
        text: str,
        schema_path: Optional[PathLike] = None,
        validator: Optional[StructuralValidator] = None,
    ) -> "MzQCFile":
        """
        Parse mzQC JSON text.

        Raises:
            ParseError: If text is not well-formed JSON.
            SchemaViolation: If schema_path is given and validation fails.
        """
        try:
            data = json.loads(text, parse_constant=reject_constant)
        except ValueError as e:
            raise ParseError(f"Error parsing JSON: {e}") from e
        return cls._from_parsed(data, schema_path, validator)

    @classmethod
    def from_file(
        cls,
        path: PathLike,
        schema_path: Optional[PathLike] = None,
        validator: Optional[StructuralValidator] = None,
    ) -> "MzQCFile":
        """
        Load an mzQC document from disk.

        Args:
            path: Path of the mzQC file.
            schema_path: Optional schema file. When given, the parsed JSON
                is structurally validated before it is mapped.
            validator: Validator to use instead of the default one.

        Returns:
            The loaded document.

        Raises:
            MzQCIOError: If the file cannot be opened.
            ParseError: If the file is not well-formed JSON.
            SchemaViolation: If validation was requested and failed.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding=FILE_ENCODING) as f:
                data = json.load(f, parse_constant=reject_constant)
        except OSError as e:
            raise MzQCIOError(f"Could not open file: {path}", str(path)) from e
        except ValueError as e:
            raise ParseError(
                f"Error parsing JSON from file {path}: {e}", str(path)
            ) from e

        mzqc = cls._from_parsed(data, schema_path, validator)
        logger.debug(f"Loaded mzQC file {path}")
        return mzqc

    @classmethod
    def _from_parsed(
        cls,
        data: Any,
        schema_path: Optional[PathLike],
        validator: Optional[StructuralValidator],
    ) -> "MzQCFile":
        if schema_path is not None:
            validate_against_schema(data, schema_path, validator).raise_for_failure()
        return cls.from_json(data)

    def to_string(
        self,
        schema_path: Optional[PathLike] = None,
        validator: Optional[StructuralValidator] = None,
    ) -> str:
        """
        Serialize the document to JSON text.

        Raises:
            SchemaViolation: If schema_path is given and the generated
                document fails validation.
            ValueError: If a metric value is NaN or infinite; such values
                have no JSON encoding.
        """
        data = self.to_json()
        if schema_path is not None:
            validate_against_schema(data, schema_path, validator).raise_for_failure()
        return json.dumps(
            data, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False
        )

    def to_file(
        self,
        path: PathLike,
        schema_path: Optional[PathLike] = None,
        validator: Optional[StructuralValidator] = None,
    ) -> None:
        """
        Write the document to disk.

        Validation, when requested, happens before the file is opened, so
        a non-conforming document never reaches disk.

        Raises:
            SchemaViolation: If validation was requested and failed.
            MzQCIOError: If the path cannot be opened for writing.
            ValueError: If a metric value is NaN or infinite.
        """
        path = Path(path)
        text = self.to_string(schema_path, validator)
        try:
            with open(path, "w", encoding=FILE_ENCODING) as f:
                f.write(text)
        except OSError as e:
            raise MzQCIOError(
                f"Could not open file for writing: {path}", str(path)
            ) from e
        logger.debug(f"Saved mzQC file {path}")

    def iter_metrics(self) -> Iterator[QualityMetric]:
        """Yield every metric, run qualities first."""
        for run in self.run_qualities:
            yield from run.metrics
        for quality_set in self.set_qualities:
            yield from quality_set.metrics

    def accessions(self) -> List[str]:
        """Return the distinct CV accessions used in the document, in order of appearance."""
        seen: Dict[str, None] = {}
        for run in self.run_qualities:
            for input_file in run.input_files:
                if input_file.file_format is not None:
                    seen.setdefault(input_file.file_format.accession)
                for prop in input_file.file_properties:
                    seen.setdefault(prop.accession)
            for software in run.analysis_software:
                seen.setdefault(software.accession)
        for metric in self.iter_metrics():
            seen.setdefault(metric.accession)
        return [accession for accession in seen if accession]

    def find_controlled_vocabulary(self, name: str) -> Optional[ControlledVocabulary]:
        for cv in self.controlled_vocabularies:
            if cv.name == name:
                return cv
        return None

    def summary(self) -> Dict[str, int]:
        run_metrics = sum(len(run.metrics) for run in self.run_qualities)
        set_metrics = sum(len(qs.metrics) for qs in self.set_qualities)
        return {
            "run_qualities": len(self.run_qualities),
            "set_qualities": len(self.set_qualities),
            "input_files": sum(len(run.input_files) for run in self.run_qualities),
            "run_metrics": run_metrics,
            "set_metrics": set_metrics,
            "total_metrics": run_metrics + set_metrics,
        }


def load(
    path: PathLike,
    schema_path: Optional[PathLike] = None,
    validator: Optional[StructuralValidator] = None,
) -> MzQCFile:
    return MzQCFile.from_file(path, schema_path, validator)


def save(
    mzqc: MzQCFile,
    path: PathLike,
    schema_path: Optional[PathLike] = None,
    validator: Optional[StructuralValidator] = None,
) -> None:
    mzqc.to_file(path, schema_path, validator)
