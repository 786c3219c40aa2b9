import io
import json
from pathlib import Path

from apps.cli import solve
from wordle_assist.harness import Session

WORDS = ["crane", "slate", "trace"]


def _play(stdin_text, **kwargs):
    out, err = io.StringIO(), io.StringIO()
    code = solve.play(Session(WORDS, **kwargs), stdin=io.StringIO(stdin_text), out=out, err=err)
    return code, out.getvalue().splitlines(), err.getvalue()


def test_play_to_solution():
    code, out, err = _play("crane\nBBGBG\nslate\nGGGGG\n")
    assert code == 0 and err == ""
    assert out == [
        "Best word: crane, exp: 0.6667",
        "Possible words left: 1",
        "slate",
        "Best word: slate, exp: 0.0000",
        "Possible words left: 1",
        "slate",
        "Solved in 2 guesses.",
    ]


def test_play_reprompts_on_bad_feedback():
    code, out, err = _play("crane\nBBXBG\ncrane\nYGGBG\n")
    assert code == 0
    assert "invalid feedback" in err
    assert out[:3] == ["Best word: crane, exp: 0.6667", "Possible words left: 1", "trace"]


def test_play_reports_inconsistent_feedback():
    code, out, err = _play("crane\nBBBBB\n")
    assert code == 0
    assert "no word in the dictionary" in err
    assert out == ["Best word: crane, exp: 0.6667"]


def test_play_eof_immediately():
    assert _play("")[0] == 0


def _words_file(tmp_path: Path) -> Path:
    p = tmp_path / "words_5.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_main_missing_file(tmp_path, capsys):
    assert solve.main(["--words", str(tmp_path / "missing.txt")]) == 2
    assert "error" in capsys.readouterr().err


def test_main_with_opening_cache(tmp_path, monkeypatch, capsys):
    words = _words_file(tmp_path)
    cache = tmp_path / "openings.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("crane\nBBGBG\nslate\nGGGGG\n"))

    assert solve.main(["--words", str(words), "--opening-cache", str(cache)]) == 0
    assert "Best word: crane, exp: 0.6667" in capsys.readouterr().out
    [entry] = json.loads(cache.read_text(encoding="utf-8")).values()
    assert entry["word"] == "crane"


def test_main_explicit_opening_and_show(tmp_path, monkeypatch, capsys):
    words = _words_file(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("gumbo\nBBBBB\n"))

    assert solve.main(["--words", str(words), "--opening", "slate:2.5", "--show", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Best word: slate, exp: 2.5000"
    assert out[1:4] == ["Possible words left: 3", "crane", "... and 2 more"]


def test_main_bad_opening(tmp_path, capsys):
    words = _words_file(tmp_path)
    assert solve.main(["--words", str(words), "--opening", "nonsense"]) == 2


def test_main_default_opening_rejected_for_other_dictionary(tmp_path, capsys):
    # tares is not in this list, and 70.5 words left is impossible with only 3 answers
    words = _words_file(tmp_path)
    assert solve.main(["--words", str(words), "--default-opening"]) == 2
    err = capsys.readouterr().err
    assert "error" in err and "tares" in err


def test_main_opening_score_larger_than_dictionary(tmp_path, capsys):
    words = _words_file(tmp_path)
    assert solve.main(["--words", str(words), "--opening", "slate:9.5"]) == 2
    assert "cannot belong" in capsys.readouterr().err


def test_main_opening_not_a_guess(tmp_path, capsys):
    words = _words_file(tmp_path)
    assert solve.main(["--words", str(words), "--opening", "gumbo:1.0"]) == 2
    assert "gumbo" in capsys.readouterr().err
