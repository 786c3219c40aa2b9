from pathlib import Path
from wordle_assist.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["shared_list"] is False
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_single_list(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "slate", "trace"])

    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is True and rep["shared_list"] is True
    assert rep["allowed"]["count"] == 3
    assert "allowed=answers" in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    ans = tmp_path / "answers_6.txt"
    allw = tmp_path / "allowed_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Planet' not lowercase
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    allw.write_text("raiser\nPlanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert rep["allowed"]["invalid_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_duplicates_reported_not_failed(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "slate", "crane"])

    rep = validate_wordlists(5, str(words))
    assert rep["passed"] is True
    assert rep["answers"]["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
