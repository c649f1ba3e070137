# tests/test_cli.py

import pytest

from kurdcal import cli, logging_setup


@pytest.fixture(autouse=True)
def _record_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_setup, "setup_logging", lambda level=None, **kw: calls.append(level))
    return calls


def test_date_shorthand(capsys):
    assert cli.main(["2025-03-21"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == "2725-01-01  Hênî, 1 Xakelêwe 2725"


def test_to_kurdish_astronomical_with_format(capsys):
    assert cli.main(["to-kurdish", "2025-03-20", "--astronomical", "--format", "d"]) == 0
    assert capsys.readouterr().out.strip() == "2725-01-01  01/01/2725"
    assert cli.main(["to-kurdish", "2025-03-21", "--dialect", "sorani-arabic", "--format", "D"]) == 0
    assert capsys.readouterr().out.strip() == "2725-01-01  ٢٧٢٥ خاکەلێوە ١"


def test_to_gregorian(capsys):
    assert cli.main(["to-gregorian", "2725-1-1"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-21"
    assert cli.main(["to-gregorian", "2725-1-1", "--astronomical", "--location", "erbil"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-20"
    assert cli.main(["to-gregorian", "2723-1-1", "--astronomical", "--lon", "0"]) == 0
    assert capsys.readouterr().out.strip() == "2023-03-20"


def test_invalid_date_is_an_error(capsys):
    assert cli.main(["to-gregorian", "2725-12-30"]) == 2
    err = capsys.readouterr().err
    assert "kurdcal: error:" in err
    assert "out of range" in err


def test_equinox(capsys):
    assert cli.main(["equinox", "2725"]) == 0
    out = capsys.readouterr().out
    assert "Gregorian year    : 2025" in out
    assert "Equinox (UTC)     : 2025-03-20T09:0" in out
    assert "Nowruz (local day): 2025-03-20" in out


def test_info(capsys):
    assert cli.main(["info", "2728"]) == 0
    out = capsys.readouterr().out
    assert "Engine      : simplified" in out
    assert "Leap year   : yes" in out
    assert "Days        : 366" in out
    assert cli.main(["info", "2725", "--astronomical"]) == 0
    out = capsys.readouterr().out
    assert "astronomical @ 44 E" in out
    assert "Nowruz      : 2025-03-20" in out


def test_parse(capsys):
    assert cli.main(["parse", "15", "Xakelêwe", "2725"]) == 0
    assert capsys.readouterr().out.strip() == "2725-01-15  ->  2025-04-04"
    assert cli.main(["parse", "Gulan"]) == 2


def test_verbose_flag(_record_logging, capsys):
    cli.main(["-v", "2025-03-21"])
    cli.main(["2025-03-21"])
    assert _record_logging == ["DEBUG", None]


def test_diag_round_trip(capsys):
    rc = cli.main(["diag", "round-trip", "--n", "50", "--engines", "simplified,erbil"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "simplified: 50/50 ok" in out
    assert "erbil: 50/50 ok" in out


def test_invalid_gregorian_date_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["2025-02-30"])
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "invalid Gregorian date '2025-02-30'" in err
    assert "Traceback" not in err


def test_info_shows_span_when_it_differs(capsys):
    assert cli.main(["info", "2727"]) == 0
    out = capsys.readouterr().out
    assert "Days        : 365" in out
    assert "Span        : 366 (month 12 runs to day 30)" in out
    assert cli.main(["info", "2725"]) == 0
    assert "Span" not in capsys.readouterr().out
