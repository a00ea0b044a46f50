"""
Command line tests for pathtracker.
"""

import json

import pytest

from pathtracker.cli import PROGRESS_FILE_ENV_VAR, main
from pathtracker.schemas import LearningUnitStatus
from pathtracker.tracking import ProgressStore


@pytest.fixture
def progress_file(tmp_path, monkeypatch):
    """An initialized starter progress file; also the default via the env var."""
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "progress.json"
    monkeypatch.setenv(PROGRESS_FILE_ENV_VAR, str(path))
    assert main(["init", "Ada Lovelace", "--output", str(path)]) == 0
    return path


class TestInit:
    """Test the init command."""

    def test_creates_file(self, progress_file):
        tracker = ProgressStore(progress_file).load()
        assert tracker.learner_id == "ada-lovelace"
        assert len(tracker.learning_units) == 3
        assert len(tracker.achievements) == 6

    def test_prints_summary(self, tmp_path, capsys):
        assert main(["init", "Ada", "--output", str(tmp_path / "p.json")]) == 0
        out = capsys.readouterr().out
        assert "Progress file created" in out
        assert "3 learning units and 6 achievements" in out

    def test_default_output_name(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["init", "Grace Hopper", "--curriculum", "full"]) == 0
        tracker = ProgressStore(tmp_path / "grace-hopper-progress.json").load()
        assert len(tracker.learning_units) == 18

    def test_refuses_overwrite(self, progress_file, capsys):
        assert main(["init", "Someone Else", "--output", str(progress_file)]) == 1
        assert "already exists" in capsys.readouterr().err
        assert main(["init", "Someone Else", "--output", str(progress_file), "--force"]) == 0
        assert ProgressStore(progress_file).load().learner_name == "Someone Else"


class TestUpdate:
    """Test the update command."""

    def test_complete_with_score(self, progress_file, capsys):
        code = main(["update", "stage1-environment", str(progress_file),
                     "--action", "complete", "--score", "95"])
        assert code == 0
        out = capsys.readouterr().out
        assert "completed with score 95.0" in out
        assert "First Steps" in out

        unit = ProgressStore(progress_file).load().get_unit("stage1-environment")
        assert unit.status == LearningUnitStatus.COMPLETED
        assert unit.score == 95.0

    def test_invalid_score_still_completes(self, progress_file):
        assert main(["update", "stage1-syntax", "--action", "complete", "--score", "abc"]) == 0
        unit = ProgressStore(progress_file).load().get_unit("stage1-syntax")
        assert unit.status == LearningUnitStatus.COMPLETED
        assert unit.score is None

    def test_start_and_skip(self, progress_file):
        assert main(["update", "stage1-syntax", "--action", "start"]) == 0
        assert main(["update", "stage1-syntax-demo", "--action", "skip"]) == 0
        tracker = ProgressStore(progress_file).load()
        assert tracker.get_unit("stage1-syntax").status == LearningUnitStatus.IN_PROGRESS
        assert tracker.get_unit("stage1-syntax-demo").status == LearningUnitStatus.SKIPPED

    def test_prompted_action(self, progress_file, monkeypatch):
        answers = iter(["2", "88"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert main(["update", "stage1-environment"]) == 0
        unit = ProgressStore(progress_file).load().get_unit("stage1-environment")
        assert unit.status == LearningUnitStatus.COMPLETED
        assert unit.score == 88.0

    def test_prompt_cancel(self, progress_file, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "4")
        assert main(["update", "stage1-environment"]) == 0
        assert "Cancelled" in capsys.readouterr().out
        unit = ProgressStore(progress_file).load().get_unit("stage1-environment")
        assert unit.status == LearningUnitStatus.NOT_STARTED

    def test_unknown_unit(self, progress_file, capsys):
        assert main(["update", "no-such-unit", "--action", "start"]) == 1
        assert "Learning unit not found: no-such-unit" in capsys.readouterr().err

    def test_illegal_transition(self, progress_file, capsys):
        assert main(["update", "stage1-syntax", "--action", "complete"]) == 0
        assert main(["update", "stage1-syntax", "--action", "start"]) == 1
        assert "Cannot move unit" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.json"
        assert main(["update", "x", str(missing), "--action", "start"]) == 1
        err = capsys.readouterr().err
        assert "not found" in err
        assert "pathtracker init" in err

    def test_score_rejected_without_complete(self, progress_file, capsys):
        assert main(["update", "stage1-syntax", "--action", "start", "--score", "90"]) == 1
        assert "--score only applies when completing" in capsys.readouterr().err
        assert main(["update", "stage1-syntax", "--action", "skip", "--score", "90"]) == 1

        unit = ProgressStore(progress_file).load().get_unit("stage1-syntax")
        assert unit.status == LearningUnitStatus.NOT_STARTED


class TestUnreadableFile:
    """Files that are not UTF-8 text report an error instead of crashing."""

    def test_show_binary_file(self, tmp_path, capsys):
        path = tmp_path / "progress.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert main(["show", str(path)]) == 1
        err = capsys.readouterr().err
        assert "Cannot read progress file" in err
        # the file exists, so no init hint
        assert "pathtracker init" not in err


class TestReports:
    """Test show, recommend, export and achievements."""

    def test_show(self, progress_file, capsys):
        assert main(["show"]) == 0
        out = capsys.readouterr().out
        assert "Learner: Ada Lovelace" in out
        assert "Overall Progress" in out

    def test_show_with_config(self, progress_file, tmp_path, capsys):
        config = tmp_path / "dashboard.yaml"
        config.write_text("show_achievements: false\n", encoding="utf-8")
        assert main(["show", "--config", str(config)]) == 0
        out = capsys.readouterr().out
        assert "Overall Progress" in out
        assert "🏆 Achievements" not in out

    def test_show_with_bad_config(self, progress_file, tmp_path, capsys):
        config = tmp_path / "dashboard.yaml"
        config.write_text("colour: red\n", encoding="utf-8")
        assert main(["show", "--config", str(config)]) == 1
        assert "Cannot load dashboard config" in capsys.readouterr().err

    def test_show_width(self, progress_file, capsys):
        assert main(["show", "--width", "10"]) == 0
        assert "[░░░░░░░░░░] 0.0%" in capsys.readouterr().out

    def test_recommend(self, progress_file, capsys):
        assert main(["recommend"]) == 0
        out = capsys.readouterr().out
        assert "Recommended stage: Stage 1: Basics" in out
        assert "Syntax Demo Code" in out
        assert "Suggestions" in out

    def test_export(self, progress_file, tmp_path):
        out = tmp_path / "reports" / "dashboard.html"
        assert main(["export", str(progress_file), str(out)]) == 0
        document = out.read_text(encoding="utf-8")
        assert document.startswith("<!DOCTYPE html>")
        assert "Ada Lovelace" in document

    def test_achievements(self, progress_file, capsys):
        main(["update", "stage1-environment", "--action", "complete"])
        capsys.readouterr()
        assert main(["achievements"]) == 0
        out = capsys.readouterr().out
        assert "First Steps [Common] - unlocked" in out
        assert "Perfect Student [Legendary] - locked" in out


class TestAdd:
    """Test the add command."""

    def test_add_unit(self, progress_file):
        code = main(["add", "stage2-borrowing", "Borrowing", "--type", "exercise",
                     "--stage", "stage2_ownership", "--minutes", "90"])
        assert code == 0
        unit = ProgressStore(progress_file).load().get_unit("stage2-borrowing")
        assert unit.estimated_time_minutes == 90
        assert unit.stage.value == "stage2_ownership"

    def test_duplicate_id(self, progress_file, capsys):
        code = main(["add", "stage1-syntax", "Again", "--type", "exercise",
                     "--stage", "stage1_basics"])
        assert code == 1
        assert "Duplicate learning unit id" in capsys.readouterr().err

    def test_document_is_plain_json(self, progress_file):
        data = json.loads(progress_file.read_text(encoding="utf-8"))
        assert data["learner_name"] == "Ada Lovelace"
        assert data["learning_units"][0]["status"] == "not_started"
