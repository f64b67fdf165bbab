import pytest

from drillbook import ui


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_reflects_environment(monkeypatch):
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Compilation of x.rs failed!")
    assert capsys.readouterr().out == "! Compilation of x.rs failed!\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran x.rs")
    assert capsys.readouterr().out == "✓ Successfully ran x.rs\n"


def test_success_with_emoji(capsys):
    ui.success("Successfully ran x.rs")
    assert capsys.readouterr().out == "✅ Successfully ran x.rs\n"


def test_warn_with_emoji(capsys):
    ui.warn("Ran x.rs with errors")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith("Ran x.rs with errors\n")


def test_markup_is_printed_literally(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("[bold]not markup[/bold]")
    assert "[bold]not markup[/bold]" in capsys.readouterr().out


def test_long_message_stays_on_one_line(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    message = "word " * 60
    ui.success(message.strip())
    out = capsys.readouterr().out
    assert out.count("\n") == 1