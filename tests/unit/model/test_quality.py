# tests/unit/model/test_quality.py
from mzqclib.model import (
    AnalysisSoftware,
    InputFile,
    QualityMetric,
    RunQuality,
    SetQuality,
)


class TestRunQuality:
    """Test RunQuality JSON mapping."""

    def test_empty_collections_always_emitted(self):
        assert RunQuality("run").to_json() == {
            "label": "run",
            "inputFiles": [],
            "analysisSoftware": [],
            "metrics": [],
        }

    def test_nested_serialization(self):
        run = RunQuality(
            "run",
            input_files=[InputFile("file:///a", "a")],
            analysis_software=[AnalysisSoftware("MS:1", "tool", "1.0")],
            metrics=[QualityMetric("QC:1", "m", value=3)],
        )
        data = run.to_json()
        assert data["inputFiles"] == [{"location": "file:///a", "name": "a"}]
        assert data["analysisSoftware"] == [
            {"accession": "MS:1", "name": "tool", "version": "1.0"}
        ]
        assert data["metrics"] == [{"accession": "QC:1", "name": "m", "value": 3}]

    def test_round_trip(self):
        run = RunQuality(
            "run",
            input_files=[InputFile("file:///a", "a")],
            analysis_software=[AnalysisSoftware("MS:1", "tool", "1.0")],
            metrics=[QualityMetric("QC:1", "m", value=[1, 2.0])],
        )
        assert RunQuality.from_json(run.to_json()) == run

    def test_from_json_preserves_order(self):
        run = RunQuality.from_json(
            {"metrics": [{"accession": "QC:%d" % i} for i in range(5)]}
        )
        assert [m.accession for m in run.metrics] == [f"QC:{i}" for i in range(5)]

    def test_from_json_defaults(self):
        assert RunQuality.from_json({}) == RunQuality()
        assert RunQuality.from_json({"inputFiles": "nope"}).input_files == []


class TestSetQuality:
    """Test SetQuality JSON mapping."""

    def test_set_refs_always_emitted(self):
        assert SetQuality("set").to_json() == {
            "label": "set",
            "setRefs": [],
            "metrics": [],
        }

    def test_round_trip(self):
        quality_set = SetQuality(
            "set", ["run_1", "run_2"], [QualityMetric("QC:1", "m", value=1.5)]
        )
        assert SetQuality.from_json(quality_set.to_json()) == quality_set

    def test_non_string_set_refs_dropped(self):
        quality_set = SetQuality.from_json({"setRefs": ["run_1", 2, None, "run_3"]})
        assert quality_set.set_refs == ["run_1", "run_3"]

    def test_serialization_copies_set_refs(self):
        quality_set = SetQuality("set", ["run_1"])
        data = quality_set.to_json()
        data["setRefs"].append("run_2")
        assert quality_set.set_refs == ["run_1"]
