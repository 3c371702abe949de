# mzqclib/model/quality.py
"""Aggregates grouping quality metrics by run or by set of runs."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.base import JsonSerializable, as_object, get_list, get_str
from .values import AnalysisSoftware, InputFile, QualityMetric


@dataclass
class RunQuality(JsonSerializable):
    """Metrics scoped to a single instrument run."""

    label: str = ""
    input_files: List[InputFile] = field(default_factory=list)
    analysis_software: List[AnalysisSoftware] = field(default_factory=list)
    metrics: List[QualityMetric] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        # Collections are emitted even when empty
        return {
            "label": self.label,
            "inputFiles": [input_file.to_json() for input_file in self.input_files],
            "analysisSoftware": [
                software.to_json() for software in self.analysis_software
            ],
            "metrics": [metric.to_json() for metric in self.metrics],
        }

    @classmethod
    def from_json(cls, data: Any) -> "RunQuality":
        data = as_object(data)
        return cls(
            label=get_str(data, "label"),
            input_files=get_list(data, "inputFiles", InputFile.from_json),
            analysis_software=get_list(
                data, "analysisSoftware", AnalysisSoftware.from_json
            ),
            metrics=get_list(data, "metrics", QualityMetric.from_json),
        )


@dataclass
class SetQuality(JsonSerializable):
    """
    Metrics aggregated over several runs.

    Attributes:
        label: Name of the set.
        set_refs: Labels of the runs the set covers.
        metrics: Metrics computed over the whole set.
    """

    label: str = ""
    set_refs: List[str] = field(default_factory=list)
    metrics: List[QualityMetric] = field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "setRefs": list(self.set_refs),
            "metrics": [metric.to_json() for metric in self.metrics],
        }

    @classmethod
    def from_json(cls, data: Any) -> "SetQuality":
        data = as_object(data)
        set_refs = data.get("setRefs")
        if isinstance(set_refs, list):
            set_refs = [ref for ref in set_refs if isinstance(ref, str)]
        else:
            set_refs = []
        return cls(
            label=get_str(data, "label"),
            set_refs=set_refs,
            metrics=get_list(data, "metrics", QualityMetric.from_json),
        )
