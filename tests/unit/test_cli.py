from __future__ import annotations

import json

import pytest

from chasecomb.cli import main


def test_text_output_lists_combinations_in_chase_order(capsys):
    assert main(["-n", "4", "-k", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["2 3", "0 3", "1 3", "1 2", "0 2", "0 1"]


def test_elements_and_limit(capsys):
    assert main(["--elements", "a", "b", "c", "-k", "2", "--limit", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["b c", "a c"]


def test_json_output(capsys):
    assert main(["-n", "3", "-k", "2", "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == [[1, 2], [0, 2], [0, 1]]


def test_csv_output(capsys):
    assert main(["-n", "3", "-k", "1", "--format", "csv"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "step,members,entered,left"
    assert len(lines) == 4


def test_count_only_prints_exact_size(capsys):
    assert main(["-n", "100", "-k", "50", "--count-only"]) == 0
    assert capsys.readouterr().out.strip() == "100891344545564193334812497256"


def test_report_output(capsys):
    assert main(["-n", "15", "-k", "7", "--report", "--limit", "100"]) == 0

    output = capsys.readouterr().out
    assert "- Combinations: 6435" in output
    assert "- Minimal Change: yes" in output


def test_config_file_with_override(tmp_path, capsys):
    config_path = tmp_path / "run.json"
    config_path.write_text(json.dumps({"n": 15, "k": 7}), encoding="utf-8")

    assert main(["--config", str(config_path), "-k", "4", "--count-only"]) == 0
    assert capsys.readouterr().out.strip() == "1365"


def test_k_larger_than_elements_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-n", "2", "-k", "3"])

    assert exc_info.value.code == 2
    assert "greater than the number of elements" in capsys.readouterr().err


def test_missing_k_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["-n", "2"])
    assert exc_info.value.code == 2


def test_n_flag_overrides_elements_from_config(tmp_path, capsys):
    config_path = tmp_path / "run.json"
    config_path.write_text(json.dumps({"elements": ["a", "b", "c"], "k": 1}), encoding="utf-8")

    assert main(["--config", str(config_path), "-n", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "3"
    assert sorted(lines) == ["0", "1", "2", "3"]


def test_csv_without_limit_for_huge_set_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-n", "100", "-k", "50", "--format", "csv"])

    assert exc_info.value.code == 2
    assert "pass an explicit limit" in capsys.readouterr().err
