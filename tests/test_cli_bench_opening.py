import csv
import json
from pathlib import Path

import pytest

from apps.cli import bench, opening

WORDS = ["crane", "slate", "trace"]


def _words_file(tmp_path: Path) -> Path:
    p = tmp_path / "words_5.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


# --- opening precompute ---
def test_opening_writes_then_reuses_cache(tmp_path, capsys):
    words = _words_file(tmp_path)
    cache = tmp_path / "cache" / "openings.json"
    argv = ["--words", str(words), "--cache", str(cache)]

    assert opening.main(argv) == 0
    out = capsys.readouterr().out
    assert "Best word: crane, exp: 0.6667" in out
    assert "(cached)" not in out
    [entry] = json.loads(cache.read_text(encoding="utf-8")).values()
    assert entry["word"] == "crane"

    assert opening.main(argv) == 0
    assert "Best word: crane, exp: 0.6667 (cached)" in capsys.readouterr().out

    assert opening.main(argv + ["--force"]) == 0
    out = capsys.readouterr().out
    assert "(cached)" not in out and f"Wrote: {cache}" in out


def test_opening_with_matrix_agrees(tmp_path, capsys):
    words = _words_file(tmp_path)
    cache = tmp_path / "openings.json"
    assert opening.main(["--words", str(words), "--cache", str(cache), "--matrix"]) == 0
    assert "Best word: crane, exp: 0.6667" in capsys.readouterr().out


def test_opening_missing_file(tmp_path, capsys):
    assert opening.main(["--words", str(tmp_path / "missing.txt"),
                         "--cache", str(tmp_path / "openings.json")]) == 2
    assert "error" in capsys.readouterr().err
    assert not (tmp_path / "openings.json").exists()


# --- benchmark ---
def _run_bench(tmp_path, *extra):
    words = _words_file(tmp_path)
    outdir = tmp_path / "reports"
    code = bench.main(["--answers", str(words), "--outdir", str(outdir), *extra])
    return code, outdir


def test_bench_writes_csv_and_manifest(tmp_path, capsys):
    code, outdir = _run_bench(tmp_path, "--sample", "2", "--progress", "off")
    assert code == 0

    [manifest_path] = outdir.glob("run_*_manifest.json")
    [csv_path] = outdir.glob("run_*.csv")
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 2
    assert manifest["solver_id"] == "expected_left"
    assert manifest["summary"]["wins"] == 2
    assert manifest["wordlists"]["shared_list"] is True

    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert {r["answer"] for r in rows} <= set(WORDS)

    out = capsys.readouterr().out
    assert "expected_left: won 2/2" in out
    assert f"Wrote: {csv_path}" in out


def test_bench_plain_progress(tmp_path, capsys):
    code, outdir = _run_bench(tmp_path, "--solver", "random_consistent", "--progress", "plain")
    assert code == 0
    assert "[3/3] 100.0%" in capsys.readouterr().err
    [manifest_path] = outdir.glob("run_*_manifest.json")
    assert json.loads(manifest_path.read_text(encoding="utf-8"))["num_cases"] == 3


@pytest.mark.parametrize("sample", ["0", "-1"])
def test_bench_rejects_non_positive_sample(tmp_path, capsys, sample):
    with pytest.raises(SystemExit) as exc:
        _run_bench(tmp_path, "--sample", sample, "--progress", "off")
    assert exc.value.code == 2
    assert "--sample must be >= 1" in capsys.readouterr().err
    assert not (tmp_path / "reports").exists()
