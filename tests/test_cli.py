import csv
import json
from pathlib import Path

import pytest

from record_matcher.cli import main, match_file
from record_matcher.config import MatchConfigError


def _write_csv(path: Path, headers: list[str], rows: list[list[str]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(headers)
        for row in rows:
            writer.writerow(row + [""] * (len(headers) - len(row)))
    return path


def _read_output(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def test_match_command_writes_annotated_file(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path / "email_or_phone.csv",
        ["FirstName", "Email1", "Phone1"],
        [
            ["John", "john@example.com", "1234567890"],
            ["Jane", "", "1234567890"],
            ["Jill", "john@example.com", ""],
            ["Alice", "alice@example.com", "9999999999"],
        ],
    )

    assert main(["match", "email_or_phone", str(path)]) == 0

    output = _read_output(tmp_path / "email_or_phone_with_user_ids.csv")
    assert [row["user_id"] for row in output] == ["1", "1", "1", ""]
    assert list(output[0]) == ["user_id", "FirstName", "Email1", "Phone1"]


def test_match_preserves_extra_columns(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path / "extra_headers.csv",
        ["FirstName", "Email1", "ExtraInfo"],
        [["Alice", "alice@example.com", "notes about alice"], ["Bob", "alice@example.com", "something else"]],
    )

    output_path = match_file(mode="email", input_csv=path, output=tmp_path / "custom.csv")

    output = _read_output(output_path)
    assert output_path == tmp_path / "custom.csv"
    assert [row["user_id"] for row in output] == ["1", "1"]
    assert output[0]["ExtraInfo"] == "notes about alice"


def test_match_on_header_only_file_writes_no_groups(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "empty.csv", ["FirstName", "Email1"], [])

    output_path = match_file(mode="email", input_csv=path)

    assert _read_output(output_path) == []


def test_unsupported_mode_fails_before_reading(tmp_path: Path) -> None:
    missing = tmp_path / "does_not_exist.csv"

    with pytest.raises(MatchConfigError):
        match_file(mode="unsupported", input_csv=missing)


def test_cli_rejects_unsupported_mode(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "invalid.csv", ["FirstName", "Email1"], [["Test", "test@example.com"]])

    with pytest.raises(SystemExit) as excinfo:
        main(["match", "unsupported", str(path)])

    assert excinfo.value.code == 2
    assert not (tmp_path / "invalid_with_user_ids.csv").exists()


def test_cli_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["match", "email", str(tmp_path / "missing.csv")]) == 1
    assert "error:" in capsys.readouterr().err


def test_run_test_generates_dataset_and_summary(tmp_path: Path) -> None:
    exit_code = main(
        [
            "run-test",
            "--size",
            "200",
            "--duplicate-rate",
            "0.2",
            "--output-dir",
            str(tmp_path),
            "--show-groups",
            "2",
        ]
    )

    assert exit_code == 0
    payload = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
    assert payload["mode"] == "email_or_phone"
    assert payload["record_count"] == 200
    assert payload["group_count"] > 0
    assert payload["min_group_size"] >= 2
    assert (tmp_path / "test_dataset.csv").exists()
    assert (tmp_path / "test_dataset_with_user_ids.csv").exists()
