"""
Typed mzQC document model.

- values: CV parameters, vocabularies, software, input files and metrics
- quality: run- and set-level aggregates of metrics
- document: the MzQCFile root with file load/save
"""

from .document import MzQCFile, current_iso_time, load, save
from .quality import RunQuality, SetQuality
from .values import (
    AnalysisSoftware,
    ControlledVocabulary,
    CvParameter,
    InputFile,
    QualityMetric,
)

__all__ = [
    "AnalysisSoftware",
    "ControlledVocabulary",
    "CvParameter",
    "InputFile",
    "MzQCFile",
    "QualityMetric",
    "RunQuality",
    "SetQuality",
    "current_iso_time",
    "load",
    "save",
]
