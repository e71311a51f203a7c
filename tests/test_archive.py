import io
import os
import tarfile

import pytest

from containerkit.archive import is_dir, tar_dir, tar_file


def _read_archive(data):
    members = {}
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
        for member in archive.getmembers():
            content = archive.extractfile(member).read() if member.isfile() else None
            members[member.name] = (member, content)
    return members


@pytest.fixture
def source_tree(tmp_path):
    root = tmp_path / "testdata"
    root.mkdir()
    (root / "Dockerfile").write_bytes(b"FROM nginx:${tag}\n")
    (root / "hello.sh").write_bytes(b"#!/bin/sh\necho hello\n")
    nested = root / "nested"
    nested.mkdir()
    (nested / "inner.txt").write_bytes(b"inner")
    return root


def test_is_dir_for_directory(tmp_path):
    folder = tmp_path / "testdata"
    folder.mkdir()
    assert is_dir(folder) is True


def test_is_dir_for_file(tmp_path):
    path = tmp_path / "docker.go"
    path.write_text("package testcontainers\n")
    assert is_dir(path) is False


def test_is_dir_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        is_dir(tmp_path / "foobar.doc")


@pytest.mark.parametrize("absolute", [False, True])
def test_tar_dir_round_trip(source_tree, monkeypatch, absolute):
    monkeypatch.chdir(source_tree.parent)
    src = str(source_tree) if absolute else os.path.join(".", "testdata")

    members = _read_archive(tar_dir(src, 0o755))

    assert set(members) == {
        "testdata",
        "testdata/Dockerfile",
        "testdata/hello.sh",
        "testdata/nested",
        "testdata/nested/inner.txt",
    }
    for source in (source_tree / "Dockerfile", source_tree / "hello.sh"):
        assert members[f"testdata/{source.name}"][1] == source.read_bytes()
    assert members["testdata/nested/inner.txt"][1] == b"inner"
    assert members["testdata"][0].isdir()
    assert all(member.mode == 0o755 for member, _ in members.values())


def test_tar_dir_skips_symlinks(source_tree):
    os.symlink(source_tree / "Dockerfile", source_tree / "link")
    members = _read_archive(tar_dir(source_tree, 0o644))
    assert "testdata/link" not in members
    assert "testdata/Dockerfile" in members


def test_tar_dir_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        tar_dir(tmp_path / "missing", 0o755)


def test_tar_file_round_trip(source_tree):
    content = (source_tree / "Dockerfile").read_bytes()
    members = _read_archive(tar_file(content, "Docker.file", 0o755))
    assert list(members) == ["Docker.file"]
    member, data = members["Docker.file"]
    assert data == content
    assert member.mode == 0o755
    assert member.size == len(content)


def test_tar_file_uses_base_name():
    members = _read_archive(tar_file(b"payload", "/some/dir/Docker.file", 0o600))
    assert list(members) == ["Docker.file"]
    assert members["Docker.file"][1] == b"payload"