"""Tests for the command line front end."""

from __future__ import annotations

import io
import json
import shutil

import pytest

from blueprint_selectors.__main__ import main


def test_validate_reports_ok(dataset_dir):
    out = io.StringIO()

    status = main(
        [
            "validate",
            str(dataset_dir / "select_scene.yaml"),
            str(dataset_dir / "motion_light.yaml"),
        ],
        out=out,
    )

    assert status == 0
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert all(line.endswith(": ok") for line in lines)


def test_validate_reports_problems(dataset_dir):
    out = io.StringIO()

    status = main(["validate", str(dataset_dir / "broken_blueprint.yaml")], out=out)

    assert status == 1
    output = out.getvalue()
    assert "blueprint.input.threshold.selector.number.max" in output
    assert "blueprint.input.style.selector.select.mode" in output


def test_validate_reports_unreadable_and_malformed_files(tmp_path, dataset_dir):
    malformed = tmp_path / "malformed.yaml"
    malformed.write_text("number: [min: 0\n", encoding="utf-8")
    valid = tmp_path / "scene.yaml"
    shutil.copy(dataset_dir / "select_scene.yaml", valid)
    out = io.StringIO()

    status = main(
        ["validate", str(tmp_path / "missing.yaml"), str(malformed), str(valid)],
        out=out,
    )

    assert status == 1
    missing_line, malformed_line, valid_line = out.getvalue().splitlines()
    assert missing_line.startswith(str(tmp_path / "missing.yaml"))
    assert "Unable to parse document" in malformed_line
    assert valid_line.endswith(": ok")


def test_validate_reports_undecodable_file_and_continues(tmp_path, dataset_dir):
    undecodable = tmp_path / "latin1.yaml"
    undecodable.write_bytes(b"number:\n  min: 0\n  max: \xff\n")
    valid = tmp_path / "scene.yaml"
    shutil.copy(dataset_dir / "select_scene.yaml", valid)
    out = io.StringIO()

    status = main(["validate", str(undecodable), str(valid)], out=out)

    assert status == 1
    undecodable_line, valid_line = out.getvalue().splitlines()
    assert undecodable_line.startswith(str(undecodable))
    assert "UTF-8" in undecodable_line
    assert valid_line.endswith(": ok")


def test_validate_tab_indented_json(tmp_path):
    document = tmp_path / "number.json"
    document.write_text('{\n\t"number": {"min": 0, "max": 10}\n}\n', encoding="utf-8")
    out = io.StringIO()

    assert main(["validate", str(document)], out=out) == 0
    assert out.getvalue().strip().endswith(": ok")


def test_validate_bare_selector_errors(tmp_path):
    document = tmp_path / "text.json"
    document.write_text('{"text": {"type": "phone"}}', encoding="utf-8")
    out = io.StringIO()

    assert main(["validate", str(document)], out=out) == 1
    assert "text.type" in out.getvalue()


def test_schema_command():
    out = io.StringIO()

    assert main(["schema", "--indent", "0"], out=out) == 0

    schema = json.loads(out.getvalue())
    assert len(schema["oneOf"]) == 23


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
