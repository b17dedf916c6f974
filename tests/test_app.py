import pytest

from knightdrag.app import main


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "knightdrag" in capsys.readouterr().out


def test_unknown_option_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2
    assert "--no-such-option" in capsys.readouterr().err