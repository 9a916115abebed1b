import pytest

from drirecord import ui


def _answers(monkeypatch, *answers):
    prompts = []
    it = iter(answers)

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(it)

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


def test_banner_names_compatible_monitors(capsys):
    ui.display_banner()
    out = capsys.readouterr().out
    assert "CARESCAPE B650/B850, S/5 Monitors" in out
    assert out.startswith("\n╔")


def test_messages_carry_their_markers(capsys):
    ui.success("done")
    ui.info("note")
    ui.progress("working")
    ui.error("failed")
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["✅ done", "ℹ️  note", "⏳ working"]
    assert captured.err == "❌ failed\n"


def test_get_input_returns_default_on_empty(monkeypatch):
    prompts = _answers(monkeypatch, "")
    assert ui.get_input("Interval", "10") == "10"
    assert "Interval" in prompts[0]
    assert "10" in prompts[0]


def test_get_input_returns_stripped_answer(monkeypatch):
    _answers(monkeypatch, "  30 ")
    assert ui.get_input("Interval", "10") == "30"


@pytest.mark.parametrize(
    "answer, expected",
    [("", True), ("y", True), ("YES", True), ("n", False), ("No", False)],
)
def test_confirm_answers(monkeypatch, answer, expected):
    _answers(monkeypatch, answer)
    assert ui.confirm("Reconnect?") is expected


def test_confirm_asks_again_on_unclear_answer(monkeypatch):
    prompts = _answers(monkeypatch, "maybe", "n")
    assert ui.confirm("Reconnect?") is False
    assert len(prompts) == 2