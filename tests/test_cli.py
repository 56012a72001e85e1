import io

import pytest

from textops.cli import Session, display_header, display_help, display_menu, main
from textops.operations import OperationError, TextBuffer


def _feeder(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def make_session(lines, text=""):
    out = io.StringIO()
    buf = TextBuffer(text, log_path=None)
    return Session(buf, _feeder(lines), out), out


def test_exit_choice_returns_false():
    session, _ = make_session([])
    assert session.run_choice(15) is False


def test_invalid_choice_raises():
    session, _ = make_session([])
    with pytest.raises(OperationError, match="Invalid option"):
        session.run_choice(99)


def test_replace_choice_updates_buffer():
    session, out = make_session(["Hello world", "7 5 there"])
    assert session.run_choice(1) is True
    assert session.buffer.text.endswith("there")
    assert f"Result: {session.buffer.text}" in out.getvalue()


def test_find_prompts_for_text_when_empty():
    session, out = make_session(["banana split", "split"])
    session.run_choice(2)
    assert session.buffer.text == "banana split"
    assert f"Found at position: {session.buffer.find('split')}" in out.getvalue()


def test_find_not_found():
    session, out = make_session(["zzz"], text="abc")
    session.run_choice(2)
    assert "Not found" in out.getvalue()


def test_remove_uses_existing_text():
    session, _ = make_session(["1 3"], text="abcdef")
    session.run_choice(3)
    assert session.buffer.text == "def"


def test_gender_choice():
    session, out = make_session(["Anna"])
    session.run_choice(4)
    assert "Guessed: Female" in out.getvalue()


def test_concat_and_insert():
    session, _ = make_session(["base", "tail"])
    session.run_choice(6)
    assert session.buffer.text == "basetail"
    session2, _ = make_session(["1 start"], text="end")
    session2.run_choice(7)
    assert session2.buffer.text == "startend"


def test_copy_invalid_raises():
    session, _ = make_session(["5 1"], text="abc")
    with pytest.raises(OperationError, match="Invalid position or length for copy"):
        session.run_choice(8)


def test_ascii_choice():
    session, out = make_session(["A"])
    session.run_choice(9)
    assert "Code: 65" in out.getvalue()


def test_upper_and_lower_choices():
    session, _ = make_session([], text="Mixed Case")
    session.run_choice(10)
    assert session.buffer.text.isupper()
    session.run_choice(11)
    assert session.buffer.text.islower()


def test_save_and_load_choices(tmp_path):
    path = tmp_path / "saved.txt"
    saver, out = make_session([str(path)], text="stored text")
    saver.run_choice(12)
    assert "Saved successfully" in out.getvalue()
    loader, _ = make_session([str(path)])
    loader.run_choice(13)
    assert loader.buffer.text == "stored text"


def test_non_number_position_raises():
    session, _ = make_session(["x 1"], text="abc")
    with pytest.raises(OperationError, match="Please enter a number"):
        session.run_choice(3)


def test_display_functions():
    out = io.StringIO()
    display_header(out)
    display_menu(out)
    display_help(out)
    text = out.getvalue()
    assert "String Operations Program" in text
    assert "15) Exit               - Quit program" in text
    assert "Detailed Help:" in text


def test_help_choice_writes_help():
    session, out = make_session([])
    session.run_choice(14)
    assert "14) Help:        this screen" in out.getvalue()


def test_loop_exit_returns_zero():
    session, out = make_session(["15"])
    assert session.loop() == 0
    assert "MENU:" in out.getvalue()


def test_loop_reports_bad_number(capsys):
    session, _ = make_session(["abc", "", "15"])
    assert session.loop() == 0
    assert "Error: Please enter a number" in capsys.readouterr().err


def test_loop_reports_invalid_option(capsys):
    session, _ = make_session(["42", "", "15"])
    assert session.loop() == 0
    assert "Error: Invalid option" in capsys.readouterr().err


def test_loop_runs_operation_then_exits():
    session, out = make_session(["5", "hello", "", "15"])
    assert session.loop() == 0
    assert session.buffer.text == "olleh"
    assert "[Press Enter to return]" in out.getvalue()


def test_loop_ends_on_eof():
    session, out = make_session([])
    assert session.loop() == 0
    assert out.getvalue().count("MENU:") == 1


def test_main_ends_on_eof(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)

    def no_input(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 0
    assert "MENU:" in capsys.readouterr().out