# tests/integration/test_walk_and_rank.py
import os
import time
from pathlib import Path

import pytest

from lister.adapters.filesystem.local_walker import LocalWalker
from lister.domain.errors import RootInaccessible
from lister.services import ListingService, RankService


def write_file(p: Path, mtime: int) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(p.name)
    os.utime(p, (mtime, mtime))
    return p


@pytest.fixture
def root(tmp_path: Path) -> Path:
    r = tmp_path / "data"
    write_file(r / "A", 100)
    write_file(r / "B", 300)
    write_file(r / "C", 200)
    write_file(r / ".D", 400)
    return r


@pytest.mark.parametrize("workers", [0, 2])
def test_top_two_skips_hidden_and_older(root: Path, workers: int):
    svc = ListingService(LocalWalker(max_workers=workers), RankService())
    entries = svc.run(root, 2)
    assert [e.path for e in entries] == ["B", "C"]
    assert [e.timestamp for e in entries] == [300, 200]


def test_n_exceeds_file_count(root: Path):
    svc = ListingService(LocalWalker(max_workers=2))
    assert [e.path for e in svc.run(root, 100)] == ["B", "C", "A"]


def test_nested_tree_and_hidden_dir_contents(tmp_path: Path):
    r = tmp_path / "proj"
    write_file(r / "src" / "main.py", 1_000)
    write_file(r / "src" / "util" / "helpers.py", 3_000)
    write_file(r / "README", 2_000)
    write_file(r / ".venv" / "lib" / "site.py", 9_000)
    write_file(r / "docs" / ".draft" / "notes.md", 8_000)

    svc = ListingService(LocalWalker(max_workers=4))
    entries = svc.run(r, 10)

    assert [e.path for e in entries] == [
        os.path.join("src", "util", "helpers.py"),
        "README",
        os.path.join("src", "main.py"),
    ]


def test_wide_tree_count_and_order(tmp_path: Path):
    r = tmp_path / "wide"
    expected = 0
    for d in range(12):
        for f in range(5):
            write_file(r / f"dir{d}" / f"sub{f % 2}" / f"file{f}.txt", 10_000 + d * 10 + f)
            expected += 1

    entries = ListingService(LocalWalker(max_workers=4)).run(r, 1_000)
    stamps = [e.timestamp for e in entries]
    assert len(entries) == expected
    assert all(a >= b for a, b in zip(stamps, stamps[1:]))
    assert len({e.path for e in entries}) == expected


def test_serial_and_parallel_walks_agree(root: Path):
    serial = {c.path for c in LocalWalker(max_workers=0).walk(root)}
    parallel = {c.path for c in LocalWalker(max_workers=4).walk(root)}
    assert serial == parallel


def test_idempotent_listing(root: Path):
    svc = ListingService(LocalWalker(max_workers=2))
    assert svc.run(root, 10) == svc.run(root, 10)


def test_empty_root(tmp_path: Path):
    assert ListingService(LocalWalker()).run(tmp_path, 10) == []


def test_zero_results_still_checks_root(tmp_path: Path):
    with pytest.raises(RootInaccessible):
        ListingService(LocalWalker()).run(tmp_path / "missing", 0)


def test_created_sort_returns_every_file(root: Path):
    before = int(time.time())
    entries = ListingService(LocalWalker(max_workers=2)).run(root, 10, "created")
    assert {e.path for e in entries} == {"A", "B", "C"}
    # either a real birth time or the "now" fallback, never pre-epoch junk
    assert all(e.timestamp >= 0 for e in entries)
    assert all(e.timestamp <= before + 60 for e in entries)


def test_dot_root_gives_clean_relative_paths(root: Path, monkeypatch):
    monkeypatch.chdir(root)
    entries = ListingService(LocalWalker(max_workers=0)).run(".", 1)
    assert [e.path for e in entries] == ["B"]
