# tests/test_cli.py
"""
Process entry point: stdout carries only sentences, diagnostics and
errors go to stderr, exit status reflects fatal generation errors only.
"""

from __future__ import annotations

import json
import re

import pytest

from bokmaal_gen.nlg.cli_frontend import main

from .conftest import LEXICON_FILE


def _run(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    out, err = capsys.readouterr()
    return exc.value.code, out, err


def _write(tmp_path, text: str):
    path = tmp_path / "no.in"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_prints_one_sentence(capsys) -> None:
    code, out, _ = _run(["--lexicon", LEXICON_FILE, "--seed", "3"], capsys)

    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 1
    assert lines[0][0].isupper() and lines[0].endswith(".")


def test_seed_is_reproducible(capsys) -> None:
    argv = ["--lexicon", LEXICON_FILE, "--seed", "17", "--count", "4"]
    _, first, _ = _run(argv, capsys)
    _, second, _ = _run(argv, capsys)

    assert first == second
    assert len(first.splitlines()) == 4


def test_one_noun_lexicon_sentence_shapes(tmp_path, capsys) -> None:
    path = _write(
        tmp_path,
        "N neut hus huset hus husene\nD neut et\nD plur mange\nV 0 gå går gikk gått\nM vil\n",
    )
    code, out, _ = _run(["--lexicon", path, "--seed", "0"], capsys)

    assert code == 0
    assert re.fullmatch(
        r"(Et hus|Huset|Mange hus|Husene) "
        r"(går|går ikke|gikk|gikk ikke|vil gå|har gått|hadde gått|vil ha gått)\.\n",
        out,
    )


def test_empty_lexicon_reports_error_and_prints_nothing(tmp_path, capsys) -> None:
    path = _write(tmp_path, "")
    code, out, err = _run(["--lexicon", path], capsys)

    assert code == 1
    assert out == ""
    assert "Error:" in err


def test_missing_lexicon_file(tmp_path, capsys) -> None:
    code, out, err = _run(["--lexicon", str(tmp_path / "nope.in")], capsys)

    assert code == 1
    assert out == ""
    assert "lexicon_file_missing" in err


def test_non_utf8_lexicon_reports_error(tmp_path, capsys) -> None:
    path = tmp_path / "latin1.in"
    path.write_bytes(b"N neut hus huset hus husene\nM m\xe5\n")
    code, out, err = _run(["--lexicon", str(path)], capsys)

    assert code == 1
    assert out == ""
    assert "lexicon_read_error" in err
    assert "Error:" in err


def test_malformed_lines_do_not_change_exit_status(tmp_path, capsys) -> None:
    path = _write(
        tmp_path,
        "X junk\nD foo bar\nN neut hus huset\n"
        "N neut hus huset hus husene\nD neut et\nD plur mange\nV 0 gå går gikk gått\nM vil\n",
    )
    code, out, err = _run(["--lexicon", path, "--seed", "5"], capsys)

    assert code == 0
    assert out.strip().endswith(".")
    assert "lexicon_unknown_word_type" in err
    assert "lexicon_unknown_determiner_form" in err


def test_strict_mode_fails_on_short_line(tmp_path, capsys) -> None:
    path = _write(tmp_path, "N neut hus huset\n")
    code, out, err = _run(["--lexicon", path, "--strict"], capsys)

    assert code == 1
    assert out == ""
    assert "line 1" in err


def test_max_depth_zero_with_clause_verbs(tmp_path, capsys) -> None:
    path = _write(tmp_path, "N neut hus huset hus husene\nD neut et\nD plur mange\nV C vite vet visste visst\nM vil\n")
    code, out, err = _run(["--lexicon", path, "--max-depth", "0"], capsys)

    assert code == 1
    assert out == ""
    assert "too deep" in err


def test_debug_output_goes_to_stderr(capsys) -> None:
    code, out, err = _run(["--lexicon", LEXICON_FILE, "--seed", "1", "--debug"], capsys)

    assert code == 0
    assert len(out.splitlines()) == 1
    debug_line = next(line for line in err.splitlines() if line.startswith("[DEBUG]"))
    payload = json.loads(debug_line[len("[DEBUG] "):])
    assert payload["tokens"]
    assert payload["lexicon"]["N"] > 0


@pytest.mark.parametrize("argv", [["--count", "0"], ["--max-depth", "-1"]])
def test_invalid_arguments(argv, capsys) -> None:
    code, _, _ = _run(argv, capsys)
    assert code == 2
