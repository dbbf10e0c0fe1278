import shutil
from pathlib import Path

from archiver.checksum import file_digest


def test_digest_is_512_bits(tmp_path: Path):
    f = tmp_path / "a.csv"
    f.write_bytes(b"x")
    assert len(file_digest(f)) == 64


def test_same_content_same_digest_regardless_of_path(tmp_path: Path):
    a = tmp_path / "a.csv"
    b = tmp_path / "sub" / "other_name.bin"
    b.parent.mkdir()
    a.write_bytes(b"OK;1;2;3\n" * 1000)
    shutil.copy(str(a), str(b))
    assert file_digest(a) == file_digest(b)


def test_single_byte_corruption_changes_digest(tmp_path: Path):
    data = bytearray(b"inspection result " * 500)
    a = tmp_path / "a.csv"
    b = tmp_path / "b.csv"
    a.write_bytes(bytes(data))
    data[437] ^= 0x01
    b.write_bytes(bytes(data))
    assert file_digest(a) != file_digest(b)


def test_chunk_size_does_not_change_digest(tmp_path: Path):
    f = tmp_path / "big.bin"
    f.write_bytes(bytes(range(256)) * 300)
    assert file_digest(f, chunk_size=7) == file_digest(f)


def test_empty_file(tmp_path: Path):
    a = tmp_path / "empty1"
    b = tmp_path / "empty2"
    a.touch()
    b.touch()
    assert file_digest(a) == file_digest(b)
