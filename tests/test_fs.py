"""Test atomic filesystem operations.

Tests for raster2svg.utils.fs:
    - ensure_dir creates parents
    - atomic_write_bytes / atomic_write_text write complete files, leave no
      tmp file behind, and clean up on failure
    - load_yaml parses mappings, returns {} for empty files, raises for
      missing files and malformed YAML
    - list_files filters by suffix (case-insensitive), sorts, skips
      directories

Run:
    pytest tests/test_fs.py -v
"""

import pytest
import yaml

from raster2svg.utils import fs


def test_ensure_dir(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert fs.ensure_dir(target) == target
    assert target.is_dir()
    # idempotent
    fs.ensure_dir(target)


def test_atomic_write_bytes(tmp_path):
    path = tmp_path / "out" / "data.bin"
    fs.atomic_write_bytes(path, b"\x00\x01\x02")
    assert path.read_bytes() == b"\x00\x01\x02"
    assert not path.with_suffix(".bin.tmp").exists()


def test_atomic_write_text_overwrites(tmp_path):
    path = tmp_path / "doc.svg"
    fs.atomic_write_text(path, "first")
    fs.atomic_write_text(path, "second ✓")
    assert path.read_text(encoding="utf-8") == "second ✓"


def test_atomic_write_failure_cleans_tmp(tmp_path):
    target = tmp_path / "taken.svg"
    target.mkdir()
    with pytest.raises(RuntimeError, match="atomically"):
        fs.atomic_write_text(target, "<svg/>")
    assert not (tmp_path / "taken.svg.tmp").exists()
    assert target.is_dir()


def test_load_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("schema: vectorize.v1\nworkers: 3\n", encoding="utf-8")
    assert fs.load_yaml(path) == {"schema": "vectorize.v1", "workers": 3}


def test_load_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert fs.load_yaml(path) == {}


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_malformed(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError, match="bad.yaml"):
        fs.load_yaml(path)


def test_list_files(tmp_path):
    for name in ["b.png", "a.PNG", "c.jpg", "d.png.txt"]:
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "dir.png").mkdir()
    assert [p.name for p in fs.list_files(tmp_path, ".png")] == ["a.PNG", "b.png"]
