import io

import pytest

from itop.main import _Action, _action_for_keys, _KeyReader, _remaining, main


@pytest.mark.parametrize("keys", ["q", "\x1b", "xq"])
def test_quit_keys(keys):
    assert _action_for_keys(keys) is _Action.QUIT


def test_refresh_key():
    assert _action_for_keys("r") is _Action.REFRESH


@pytest.mark.parametrize("keys", ["", "x", "Q", "\x1b[A", "\x1bq"])
def test_other_input_is_ignored(keys):
    assert _action_for_keys(keys) is None


def test_first_recognised_key_wins():
    assert _action_for_keys("rq") is _Action.REFRESH
    assert _action_for_keys("qr") is _Action.QUIT


def test_remaining_counts_down_to_zero():
    assert _remaining(1.0, 0.25) == pytest.approx(0.75)
    assert _remaining(1.0, 1.0) == 0.0
    assert _remaining(1.0, 5.0) == 0.0


def test_key_reader_without_terminal_times_out():
    with _KeyReader(io.StringIO()) as reader:
        assert reader.read(0.0) is None


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "itop" in capsys.readouterr().out


def test_unknown_option_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2