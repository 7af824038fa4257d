#!/usr/bin/env python3
"""
Tests for the command line interface
"""

import json
import os

import pytest

from chapter_locator.cli import build_parser, main

from conftest import TITLES, build_pdf_bytes


@pytest.fixture
def pdf_path(tmp_path):
    path = tmp_path / "book.pdf"
    path.write_bytes(build_pdf_bytes())
    return str(path)


@pytest.fixture
def titles_path(tmp_path):
    path = tmp_path / "titles.txt"
    path.write_text("# expected chapters\n" + "\n".join(TITLES[:2]) + "\n", encoding="utf-8")
    return str(path)


def test_detect_prints_report_and_writes_json(pdf_path, titles_path, tmp_path, capsys):
    json_path = str(tmp_path / "out" / "result.json")
    assert main(["detect", pdf_path, "--titles", titles_path, "--json", json_path, "--quiet"]) == 0

    out = capsys.readouterr().out
    assert "Total pages: 12" in out
    assert f"Chapter 1: pages 2-6 - {TITLES[0]}" in out
    assert "MISSING CHAPTERS" not in out

    with open(json_path, encoding="utf-8") as f:
        document = json.load(f)
    assert document['statistics'] == {'expected_chapters': 2, 'found_chapters': 2, 'missing_chapters': 0}
    assert [c['start_page'] for c in document['chapters']] == [2, 7]


def test_detect_with_split_dir(pdf_path, titles_path, tmp_path):
    split_dir = tmp_path / "chapters"
    assert main(["detect", pdf_path, "--titles", titles_path, "--split-dir", str(split_dir), "--quiet"]) == 0
    assert len(os.listdir(split_dir)) == 2


def test_threshold_override_reports_missing(pdf_path, titles_path, capsys):
    assert main(["detect", pdf_path, "--titles", titles_path, "--threshold", "20", "--quiet"]) == 0
    assert "MISSING CHAPTERS: 1, 2" in capsys.readouterr().out


def test_missing_pdf_returns_error(titles_path, capsys):
    assert main(["detect", "/nonexistent/book.pdf", "--titles", titles_path]) == 1
    assert "Error: PDF file not found" in capsys.readouterr().out


def test_empty_titles_file_returns_error(pdf_path, tmp_path, capsys):
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n", encoding="utf-8")
    assert main(["detect", pdf_path, "--titles", str(empty)]) == 1
    assert "Invalid configuration" in capsys.readouterr().out


def test_split_command_writes_parts(pdf_path, tmp_path):
    out_dir = tmp_path / "parts"
    assert main(["split", pdf_path, "--out-dir", str(out_dir), "--parts", "2"]) == 0
    names = sorted(os.listdir(out_dir))
    assert len(names) == 2
    assert names[0].startswith("book.p12.part01-of-02.")


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
