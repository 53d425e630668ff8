"""
CLI tests
"""
import json

import pytest
from loguru import logger

from main import main


@pytest.fixture(autouse=True)
def reset_logging():
    """main() installs its own sinks"""
    yield
    logger.remove()


class TestMain:
    """Exit codes and output"""

    def test_scores_class(self, sample_class_data, tmp_path, capsys):
        class_file = tmp_path / "class.json"
        output = tmp_path / "results.json"
        class_file.write_text(json.dumps(sample_class_data), encoding="utf-8")

        assert main([str(class_file), "--output", str(output)]) == 0

        results = json.loads(output.read_text(encoding="utf-8"))
        assert [r["placing"] for r in results["results"]] == ["1", "2=", "2=", "4", "5", ""]
        assert "90cm Open" in capsys.readouterr().out

    def test_tie_break_flag(self, sample_class_data, tmp_path):
        class_file = tmp_path / "class.json"
        output = tmp_path / "results.json"
        class_file.write_text(json.dumps(sample_class_data), encoding="utf-8")

        assert main([str(class_file), "--output", str(output), "--tie-break-by-time"]) == 0

        results = json.loads(output.read_text(encoding="utf-8"))
        assert results["tie_break_by_time"] is True
        assert results["results"][1]["placing"] == "2"

    def test_scoring_error(self, sample_class_data, tmp_path):
        sample_class_data["competitors"][0]["marks"] = [["??"]]
        class_file = tmp_path / "class.json"
        class_file.write_text(json.dumps(sample_class_data), encoding="utf-8")

        assert main([str(class_file)]) == 1

    def test_entry_point(self):
        """main.py delegates to the packaged CLI"""
        from showjumping.cli import main as cli_main
        assert main is cli_main

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 2

    def test_malformed_json(self, tmp_path):
        class_file = tmp_path / "class.json"
        class_file.write_text("{not json", encoding="utf-8")

        assert main([str(class_file)]) == 2

    def test_invalid_file(self, sample_class_data, tmp_path):
        del sample_class_data["name"]
        class_file = tmp_path / "class.json"
        class_file.write_text(json.dumps(sample_class_data), encoding="utf-8")

        assert main([str(class_file)]) == 2
