"""Tests for the command-line front end."""

import pytest

from textsub.cli import CLIHandler


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(handler: CLIHandler, argv) -> int:
    with pytest.raises(SystemExit) as excinfo:
        handler.run(argv)
    return excinfo.value.code


def test_cli_writes_subtitle_file(workdir) -> None:
    (workdir / "doc.txt").write_text("Hello\n\nWorld\n", encoding="utf-8")

    code = _run(CLIHandler(), ["-i", "doc.txt", "-o", "out"])

    assert code == 0
    assert (workdir / "out" / "subtitle.srt").read_text(encoding="utf-8") == (
        "1\n00:00:00,000 --> 00:00:03,000\nHello\n\n"
        "2\n00:00:03,000 --> 00:00:06,000\nWorld\n\n"
    )


def test_cli_duration_and_normalize_flags(workdir) -> None:
    (workdir / "doc.txt").write_text("A：B,C。D", encoding="utf-8")

    code = _run(CLIHandler(), ["-i", "doc.txt", "-o", "out", "-d", "1.5", "--normalize"])

    content = (workdir / "out" / "subtitle.srt").read_text(encoding="utf-8")
    assert code == 0
    assert content.count(" --> ") == 4
    assert "4\n00:00:04,500 --> 00:00:06,000\nD\n\n" in content


def test_cli_reads_config_file(workdir) -> None:
    (workdir / "doc.txt").write_text("only line", encoding="utf-8")
    (workdir / "settings.yaml").write_text("duration: 5\noutput_filename: mine.srt\n", encoding="utf-8")

    code = _run(CLIHandler(), ["-i", "doc.txt", "-o", "out", "-c", "settings.yaml"])

    assert code == 0
    assert "00:00:00,000 --> 00:00:05,000" in (workdir / "out" / "mine.srt").read_text(encoding="utf-8")


def test_cli_missing_explicit_config_exits_1(workdir) -> None:
    (workdir / "doc.txt").write_text("x", encoding="utf-8")
    assert _run(CLIHandler(), ["-i", "doc.txt", "-o", "out", "-c", "absent.yaml"]) == 1


def test_cli_missing_input_exits_1(workdir) -> None:
    assert _run(CLIHandler(), ["-i", "absent.txt", "-o", "out"]) == 1


def test_cli_invalid_duration_exits_1(workdir) -> None:
    (workdir / "doc.txt").write_text("x", encoding="utf-8")
    assert _run(CLIHandler(), ["-i", "doc.txt", "-o", "out", "-d", "0"]) == 1
    assert not (workdir / "out" / "subtitle.srt").exists()


def test_cli_interactive_asks_for_duration(workdir) -> None:
    (workdir / "doc.txt").write_text("a\nb", encoding="utf-8")
    answers = iter(["20", "2.5"])

    code = _run(CLIHandler(input_func=lambda prompt: next(answers)), ["-i", "doc.txt", "-o", "out", "--interactive"])

    assert code == 0
    assert "00:00:02,500 --> 00:00:05,000\nb" in (workdir / "out" / "subtitle.srt").read_text(encoding="utf-8")


def test_cli_interactive_cancel_writes_nothing(workdir) -> None:
    (workdir / "doc.txt").write_text("a", encoding="utf-8")

    code = _run(CLIHandler(input_func=lambda prompt: "q"), ["-i", "doc.txt", "-o", "out", "--interactive"])

    assert code == 0
    assert not (workdir / "out").exists()


def test_cli_interactive_closed_stdin_cancels(workdir) -> None:
    (workdir / "doc.txt").write_text("a", encoding="utf-8")

    def closed_stdin(prompt):
        raise EOFError

    code = _run(CLIHandler(input_func=closed_stdin), ["-i", "doc.txt", "-o", "out", "--interactive"])

    assert code == 0
    assert not (workdir / "out").exists()
