"""Tests for the batch front end."""

import os

import pytest

import main_batch


def test_find_and_sort_documents_orders_by_size(tmp_path) -> None:
    (tmp_path / "big.txt").write_text("x" * 100, encoding="utf-8")
    (tmp_path / "small.docx").write_bytes(b"x")
    (tmp_path / "~$small.docx").write_bytes(b"lock")
    (tmp_path / "video.mp4").write_bytes(b"")

    found = main_batch.find_and_sort_documents(str(tmp_path))

    assert [os.path.basename(path) for path, _ in found] == ["small.docx", "big.txt"]


def test_find_and_sort_documents_missing_dir(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        main_batch.find_and_sort_documents(str(tmp_path / "absent"))


def test_batch_converts_each_document(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "one.txt").write_text("first\nsecond", encoding="utf-8")
    (docs / "two.txt").write_text("a, b", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main_batch.run_batch_processing(["-i", str(docs), "-d", "2", "--normalize"])

    assert excinfo.value.code == 0
    assert (docs / "Subs" / "one.srt").read_text(encoding="utf-8").count(" --> ") == 2
    assert "2\n00:00:02,000 --> 00:00:04,000\n b\n\n" in (docs / "Subs" / "two.srt").read_text(encoding="utf-8")


def test_batch_reports_unreadable_documents(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "ok.txt").write_text("fine", encoding="utf-8")
    (docs / "bad.txt").write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SystemExit) as excinfo:
        main_batch.run_batch_processing(["-i", str(docs)])

    assert excinfo.value.code == 1
    assert (docs / "Subs" / "ok.srt").exists()
    assert not (docs / "Subs" / "bad.srt").exists()


def test_batch_exports_document_whose_text_matches_error_placeholder(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "note.txt").write_text("Error reading file. Please try again.", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main_batch.run_batch_processing(["-i", str(docs)])

    assert excinfo.value.code == 0
    assert "Error reading file" in (docs / "Subs" / "note.srt").read_text(encoding="utf-8")
