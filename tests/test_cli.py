"""Tests for the batch command-line driver."""

import json

import pytest

import main


def write_response(path, lines):
    response = {"pages": [{
        "text": "\n".join(lines),
        "lines": [{"text": line} for line in lines],
        "words": [],
    }]}
    path.write_text(json.dumps(response, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def input_dir(tmp_path, slip_lines):
    directory = tmp_path / "responses"
    directory.mkdir()
    write_response(directory / "slip_01.json", slip_lines)
    write_response(directory / "slip_02.json", ["vehicle number: 8713"])
    (directory / "slip_03.json").write_text("{broken", encoding="utf-8")
    return directory


def test_run_parsing_directory(input_dir, tmp_path):
    json_path = tmp_path / "results.json"
    results = main.run_parsing(str(input_dir), json_path=str(json_path), enable_excel=False)

    assert [r.success for r in results] == [True, False, False]
    assert results[0].source_file.endswith("slip_01.json")
    assert len(results[1].errors) == 4
    assert len(json.loads(json_path.read_text(encoding="utf-8"))) == 3


def test_main_writes_excel(input_dir, tmp_path):
    excel_path = tmp_path / "results.xlsx"
    exit_code = main.main(["--input", str(input_dir), "--output", str(excel_path), "--quiet"])

    assert exit_code == 0
    assert excel_path.exists()


def test_main_missing_input(tmp_path):
    assert main.main(["--input", str(tmp_path / "missing"), "--no-excel", "--quiet"]) == 1


def test_main_empty_directory(tmp_path):
    assert main.main(["--input", str(tmp_path), "--no-excel", "--quiet"]) == 1


def test_run_parsing_continues_past_undecodable_file(tmp_path, slip_lines):
    directory = tmp_path / "responses"
    directory.mkdir()
    write_response(directory / "slip_01.json", slip_lines)
    (directory / "slip_02.json").write_bytes(b'\xff\xfe\x00garbage')

    results = main.run_parsing(str(directory), enable_excel=False)

    assert [r.success for r in results] == [True, False]
    assert results[1].source_file.endswith("slip_02.json")
