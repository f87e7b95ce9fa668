import zipfile

import pytest

from tinylove.archive import ArchiveError, unzip


def make_zip(path, entries):
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return path


def test_extracts_files_and_directories(tmp_path):
    archive = make_zip(
        tmp_path / "game.zip",
        [("assets/", b""), ("assets/a.txt", b"hello"), ("top.txt", b"world")],
    )
    out = tmp_path / "out"
    unzip(archive, out)
    assert (out / "assets").is_dir()
    assert (out / "assets" / "a.txt").read_bytes() == b"hello"
    assert (out / "top.txt").read_bytes() == b"world"


def test_round_trip_of_binary_data(tmp_path):
    payload = bytes(range(256)) * 100
    archive = make_zip(tmp_path / "bin.zip", [("blob.bin", payload)])
    unzip(archive, tmp_path / "x")
    assert (tmp_path / "x" / "blob.bin").read_bytes() == payload


def test_missing_archive(tmp_path):
    with pytest.raises(ArchiveError):
        unzip(tmp_path / "nope.zip", tmp_path / "out")


def test_not_a_zip(tmp_path):
    bad = tmp_path / "bad.zip"
    bad.write_bytes(b"this is not an archive")
    with pytest.raises(ArchiveError):
        unzip(bad, tmp_path / "out")


def test_file_in_missing_directory_fails(tmp_path):
    archive = make_zip(tmp_path / "g.zip", [("sub/a.txt", b"x")])
    with pytest.raises(ArchiveError):
        unzip(archive, tmp_path / "out")


def test_entry_escaping_destination_is_rejected(tmp_path):
    archive = make_zip(tmp_path / "evil.zip", [("../evil.txt", b"x")])
    with pytest.raises(ArchiveError):
        unzip(archive, tmp_path / "out")
    assert not (tmp_path / "evil.txt").exists()