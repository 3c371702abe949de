# mzqclib/model/values.py
"""
Value objects of the mzQC document model.

Each class owns its own JSON mapping through the JsonSerializable
capability. Attribute names are snake_case; the emitted keys keep the
camelCase names used by the mzQC format.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.base import JsonSerializable, as_object, get_list, get_str, put_if_set
from ..utils.json_values import to_json_value


@dataclass
class CvParameter(JsonSerializable):
    """A controlled-vocabulary term reference, optionally carrying a value."""

    accession: str = ""
    name: str = ""
    value: str = ""
    cv_ref: str = ""

    def to_json(self) -> Dict[str, Any]:
        data = {"accession": self.accession, "name": self.name}
        put_if_set(data, "value", self.value)
        put_if_set(data, "cvRef", self.cv_ref)
        return data

    @classmethod
    def from_json(cls, data: Any) -> "CvParameter":
        data = as_object(data)
        return cls(
            accession=get_str(data, "accession"),
            name=get_str(data, "name"),
            value=get_str(data, "value"),
            cv_ref=get_str(data, "cvRef"),
        )


@dataclass
class ControlledVocabulary(JsonSerializable):
    """An ontology referenced by the document. All four fields are always emitted."""

    name: str = ""
    uri: str = ""
    version: str = ""
    id: str = ""

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "uri": self.uri,
            "version": self.version,
        }

    @classmethod
    def from_json(cls, data: Any) -> "ControlledVocabulary":
        data = as_object(data)
        return cls(
            id=get_str(data, "id"),
            name=get_str(data, "name"),
            uri=get_str(data, "uri"),
            version=get_str(data, "version"),
        )


@dataclass
class AnalysisSoftware(JsonSerializable):
    """Software used to compute the metrics of a run."""

    accession: str = ""
    name: str = ""
    version: str = ""
    uri: str = ""

    def to_json(self) -> Dict[str, Any]:
        data = {
            "accession": self.accession,
            "name": self.name,
            "version": self.version,
        }
        put_if_set(data, "uri", self.uri)
        return data

    @classmethod
    def from_json(cls, data: Any) -> "AnalysisSoftware":
        data = as_object(data)
        return cls(
            accession=get_str(data, "accession"),
            name=get_str(data, "name"),
            version=get_str(data, "version"),
            uri=get_str(data, "uri"),
        )


@dataclass
class InputFile(JsonSerializable):
    """
    A raw or derived file the metrics were computed from.

    Attributes:
        location: URI of the file.
        name: File name.
        file_format: CV term describing the format, or None if unknown.
        file_properties: Additional CV terms (checksums, instrument, ...).
    """

    location: str = ""
    name: str = ""
    file_format: Optional[CvParameter] = None
    file_properties: List[CvParameter] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"location": self.location, "name": self.name}
        if self.file_format is not None:
            data["fileFormat"] = self.file_format.to_json()
        if self.file_properties:
            data["fileProperties"] = [prop.to_json() for prop in self.file_properties]
        return data

    @classmethod
    def from_json(cls, data: Any) -> "InputFile":
        data = as_object(data)
        file_format = None
        if "fileFormat" in data:
            file_format = CvParameter.from_json(data["fileFormat"])
        return cls(
            location=get_str(data, "location"),
            name=get_str(data, "name"),
            file_format=file_format,
            file_properties=get_list(data, "fileProperties", CvParameter.from_json),
        )


@dataclass
class QualityMetric(JsonSerializable):
    """
    A single QC metric.

    The value is an opaque JSON payload: None means absent, otherwise any of
    bool, int, float, str, list or dict. numpy scalars and arrays are
    converted to the equivalent native types on construction.
    """

    accession: str = ""
    name: str = ""
    description: str = ""
    value: Any = None
    unit: str = ""

    def __post_init__(self):
        self.value = to_json_value(self.value)

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"accession": self.accession, "name": self.name}
        put_if_set(data, "description", self.description)
        if self.value is not None:
            data["value"] = to_json_value(self.value)
        put_if_set(data, "unit", self.unit)
        return data

    @classmethod
    def from_json(cls, data: Any) -> "QualityMetric":
        data = as_object(data)
        return cls(
            accession=get_str(data, "accession"),
            name=get_str(data, "name"),
            description=get_str(data, "description"),
            value=data.get("value"),
            unit=get_str(data, "unit"),
        )
