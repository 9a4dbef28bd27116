from __future__ import annotations

import pytest

from collation import cli, rules


def test_compare(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["compare", "Résumé", "resume"]) == 0
    assert capsys.readouterr().out == "0\n"

    assert cli.run(["compare", "cote", "coast", "--locale", "fr"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_sort_show_default(capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli.run(["sort", "--show-default", "cote", "côte", "coast", "coté", "côté"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "default: coast cote coté côte côté",
        "collated: coast cote côte coté côté",
    ]


def test_sort_one_per_line(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["sort", "--locale", "es", "ñu", "nube", "oso"]) == 0
    assert capsys.readouterr().out == "nube\nñu\noso\n"


def test_key_hex(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["key", "Çà", "--locale", "fr"]) == 0
    assert capsys.readouterr().out == "6361\n"


def test_locales(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["locales"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["es", "fr"]
    assert lines[1].split("\t")[1] == rules.table_digest(rules.supported_locales()[1])


def test_rules(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["rules", "--locale", "es"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "á -> a"
    assert "ñ -> nz" in out
    assert len(out) == 7


def test_unsupported_locale_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["compare", "a", "b", "--locale", "de"]) == cli.EXIT_BAD_INPUT
    assert "Unsupported locale: de" in capsys.readouterr().err


def test_malformed_locale_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["rules", "--locale", ""]) == cli.EXIT_BAD_INPUT
    assert capsys.readouterr().err.startswith("error: ")


def test_default_locale_from_env(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("COLLATION_LOCALE", "es")
    assert cli.default_locale() == "es"
    assert cli.run(["rules"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 7

    monkeypatch.setenv("COLLATION_LOCALE", "  ")
    assert cli.default_locale() == "fr"
    monkeypatch.delenv("COLLATION_LOCALE")
    assert cli.default_locale() == "fr"


def test_main_exits_with_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["collation", "compare", "a", "b", "--locale", "xx"])
    with pytest.raises(SystemExit) as ei:
        cli.main()
    assert ei.value.code == cli.EXIT_BAD_INPUT
