"""
mzqclib - Read, write and validate mzQC quality-control files.

This package provides a typed model of the PSI mzQC format with a lossless
JSON mapping, structural validation of documents, and a cache of
controlled-vocabulary terms loaded from OBO files.
"""

from .errors import CacheLoadError, MzQCError, MzQCIOError, ParseError, SchemaViolation
from .model import (
    AnalysisSoftware,
    ControlledVocabulary,
    CvParameter,
    InputFile,
    MzQCFile,
    QualityMetric,
    RunQuality,
    SetQuality,
    load,
    save,
)
from .ontology import CvTermCache, CvTermDetails
from .validation import SchemaCache, StructuralValidator, ValidationResult, ValidationRule

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AnalysisSoftware",
    "CacheLoadError",
    "ControlledVocabulary",
    "CvParameter",
    "CvTermCache",
    "CvTermDetails",
    "InputFile",
    "MzQCError",
    "MzQCFile",
    "MzQCIOError",
    "ParseError",
    "QualityMetric",
    "RunQuality",
    "SchemaCache",
    "SchemaViolation",
    "SetQuality",
    "StructuralValidator",
    "ValidationResult",
    "ValidationRule",
    "load",
    "save",
]
