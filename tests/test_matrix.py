import numpy as np
import pytest
from wordle_assist.engine import (
    best_guess, penalty, InvalidWord, NoConsistentCandidates, EmptyDictionary,
)
from wordle_assist.engine.matrix import PatternMatrix

ANSWERS = ["crane", "slate", "trace", "react", "caret", "stare", "tears", "least", "steal", "mound"]
GUESSES = ANSWERS + ["gumbo", "tares", "plumb"]


@pytest.fixture(scope="module")
def matrix():
    return PatternMatrix.build(GUESSES, ANSWERS)


def test_matrix_shape_and_dtype(matrix):
    assert matrix.codes.shape == (len(GUESSES), len(ANSWERS))
    assert matrix.codes.dtype == np.uint8
    # a word against itself is all green
    assert matrix.codes[0, 0] == 242


def test_matrix_penalties_match_pure(matrix):
    cands = ANSWERS[2:8]
    pens = matrix.penalties(cands)
    assert pens.tolist() == [penalty(g, cands) for g in GUESSES]


@pytest.mark.parametrize("cands", [ANSWERS, ANSWERS[:3], ANSWERS[4:9], ["mound"]])
def test_matrix_best_guess_matches_selector(matrix, cands):
    assert matrix.best_guess(cands) == best_guess(GUESSES, cands)


def test_matrix_rejects_unknown_candidate(matrix):
    with pytest.raises(InvalidWord):
        matrix.best_guess(["crane", "zzzzz"])


def test_matrix_empty_candidates(matrix):
    with pytest.raises(NoConsistentCandidates):
        matrix.best_guess([])


def test_matrix_build_requires_words():
    with pytest.raises(EmptyDictionary):
        PatternMatrix.build([], ANSWERS)


def test_matrix_save_load(tmp_path, matrix):
    p = tmp_path / "cache" / "pattern.npz"
    matrix.save(p)
    loaded = PatternMatrix.load(p)
    assert loaded.matches(GUESSES, ANSWERS)
    assert np.array_equal(loaded.codes, matrix.codes)
    assert not loaded.matches(ANSWERS, ANSWERS)
