"""
Common test fixtures for mzqclib tests.
"""

import json
import tempfile
from pathlib import Path

import pytest

from mzqclib.model import (
    AnalysisSoftware,
    ControlledVocabulary,
    CvParameter,
    InputFile,
    MzQCFile,
    QualityMetric,
    RunQuality,
    SetQuality,
)
from mzqclib.validation import SchemaCache, StructuralValidator

SAMPLE_OBO = """format-version: 1.2
data-version: 4.1.55
! header comment

[Term]
id: MS:0000000
name: Proteomics Standards Initiative Mass Spectrometry Vocabularies
def: "Proteomics Standards Initiative Mass Spectrometry Vocabularies." [PSI:MS]

[Term]
id: MS:1000584
name: mzML format
def: "Proteomics Standards Inititative mzML file format." [PSI:MS]
is_a: MS:1000560 ! mass spectrometer file format

[Term]
id: QC:4000053
name: quantification score
def: "A score for the quantification." [PSI:QC]
xref: value-type:xsd\\:double "The allowed value-type for this CV term."
is_a: QC:4000001 ! QC metric
is_a: MS:1000000 ! PSI-MS CV term
relationship: has_units UO:0000010 ! second

[Typedef]
id: has_units
name: has_units
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def schema_path(temp_dir):
    """Write a placeholder mzQC schema file."""
    path = temp_dir / "mzqc_schema.json"
    path.write_text(
        json.dumps(
            {
                "$schema": "https://json-schema.org/draft/2020-12/schema",
                "title": "mzQC",
                "required": ["mzQC"],
            }
        )
    )
    return path


@pytest.fixture
def validator():
    """A validator with its own schema cache, isolated from other tests."""
    return StructuralValidator(SchemaCache())


@pytest.fixture
def minimal_document():
    """The smallest document that passes structural validation."""
    return {
        "mzQC": {
            "version": "1.0.0",
            "creationDate": "2023-01-01T00:00:00Z",
            "runQualities": [],
            "setQualities": [],
            "controlledVocabularies": [],
        }
    }


@pytest.fixture
def sample_obo(temp_dir):
    """Write a small OBO file covering terms, comments and a typedef."""
    path = temp_dir / "sample.obo"
    path.write_text(SAMPLE_OBO)
    return path


@pytest.fixture
def sample_mzqc():
    """A fully populated document exercising every entity."""
    input_file = InputFile(
        location="file:///path/to/input.mzML",
        name="input.mzML",
        file_format=CvParameter("MS:1000584", "mzML file", cv_ref="PSI-MS"),
        file_properties=[
            CvParameter("MS:1000747", "completion time", "2017-12-08-T15:38:57Z"),
        ],
    )
    software = AnalysisSoftware(
        "MS:1000799", "custom tool", "1.0.0", "http://example.org/tool"
    )
    run = RunQuality(
        label="run_1",
        input_files=[input_file],
        analysis_software=[software],
        metrics=[
            QualityMetric("QC:4000053", "quantification score", value=5),
            QualityMetric(
                "QC:4000059",
                "number of MS1 spectra",
                description="Number of MS1 spectra in the run",
                value=2.5,
                unit="UO:0000189",
            ),
            QualityMetric(
                "QC:4000062",
                "table metric",
                value={"RT": [1.0, 2.5], "peptide": ["PEPTIDE", "ÄPEP\"TIDE"]},
            ),
        ],
    )
    quality_set = SetQuality(
        label="set_1",
        set_refs=["run_1"],
        metrics=[QualityMetric("QC:4000070", "set metric", value=[1, 2, 3])],
    )
    return MzQCFile(
        creation_date="2023-01-01T00:00:00Z",
        version="1.0.0",
        contact_name="Contact Name",
        contact_address="Contact Address",
        description="Description",
        run_qualities=[run],
        set_qualities=[quality_set],
        controlled_vocabularies=[
            ControlledVocabulary(
                "PSI-MS",
                "https://github.com/HUPO-PSI/psi-ms-CV/blob/master/psi-ms.obo",
                "4.1.55",
            )
        ],
    )
