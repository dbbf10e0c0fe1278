import os
import time
from pathlib import Path

import pytest

from archiver.models import Config, Station, StationType

DAY = 86400


@pytest.fixture
def dirs(tmp_path: Path):
    src = tmp_path / "input"
    dst = tmp_path / "archive"
    src.mkdir()
    dst.mkdir()
    return src, dst


@pytest.fixture
def make_config(dirs):
    src, dst = dirs

    def _make(time_limit: int = 5, only_copy: bool = False, line: int = 3,
              name: StationType = StationType.AOI) -> Config:
        return Config(
            input_dir=src,
            output_dir=dst,
            time_limit=time_limit,
            only_copy=only_copy,
            station=Station(line=line, name=name),
        )

    return _make


def write_file(path: Path, content: bytes = b"PASS;12.5;0.03\n", age_days: float = 0,
               mtime: float = None) -> Path:
    """Write a file and backdate its mtime by age_days (or set mtime directly)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    if mtime is None:
        mtime = time.time() - age_days * DAY
    os.utime(path, (mtime, mtime))
    return path
