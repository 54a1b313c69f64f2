# tests/test_cli.py

import pytest

from caljd.cli import main


def _run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out.strip(), err


def test_julday(capsys):
    assert _run(capsys, "julday", "1900-01-01") == (0, "2415021", "")
    assert _run(capsys, "julday", "1900-01-01", "--calendar", "lilian")[1] == "115861"


def test_unknown_calendar_falls_back_to_julian(capsys):
    assert _run(capsys, "julday", "1900-01-01", "--calendar", "gregorian") == (0, "2415021", "")
    assert _run(capsys, "caldat", "2415021", "--calendar", "standard")[1] == "1900-01-01"


def test_caldat(capsys):
    assert _run(capsys, "caldat", "115861", "--calendar", "lilian")[1] == "1900-01-01"
    assert _run(capsys, "caldat", "0")[1] == "-4712-01-01"


def test_date2dec(capsys):
    rc, out, _ = _run(capsys, "date2dec", "2000-01-01 12:00")
    assert rc == 0
    assert float(out) == pytest.approx(2451545.0, abs=1e-6)

    rc, out, _ = _run(capsys, "date2dec", "1900-01-02 12:00:00", "--units", "hours since 1900-01-01")
    assert float(out) == pytest.approx(36.0, abs=1e-5)


def test_dec2date(capsys):
    rc, out, _ = _run(capsys, "dec2date", "36", "--units", "hours since 1900-01-01")
    assert rc == 0
    assert out == "1900-01-02 12:00:00"
    assert _run(capsys, "dec2date", "2451545.25")[1] == "2000-01-01 18:00:00"


def test_conversion_errors_exit_with_2(capsys):
    rc, out, err = _run(capsys, "julday", "1582-10-10")
    assert rc == 2
    assert out == ""
    assert "error" in err

    rc, _, err = _run(capsys, "dec2date", "1", "--units", "weeks since 2000-01-01")
    assert rc == 2
    assert "error" in err


def test_unparseable_date_exits(capsys):
    with pytest.raises(SystemExit):
        main(["julday", "01/01/1900"])


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "50"]) == 0
    assert "0 failures" in capsys.readouterr().out


def test_diag_epsilon_without_plot(capsys):
    assert main(["diag", "epsilon", "--no-plot", "--N", "200"]) == 0
    assert "with nudge" in capsys.readouterr().out
