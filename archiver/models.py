from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from datetime import datetime
from typing import List

class StationType(str, Enum):
    SPI = "SPI"
    AOI = "AOI"

@dataclass(frozen=True)
class Station:
    line: int
    name: StationType

    @property
    def folder_name(self) -> str:
        return f"L{self.line}_{self.name.value}"

@dataclass(frozen=True)
class Config:
    input_dir: Path
    output_dir: Path
    time_limit: int  # days
    only_copy: bool
    station: Station

@dataclass(frozen=True)
class FileCandidate:
    path: Path
    name: str
    size: int
    mtime: datetime  # tz-aware, local

@dataclass(frozen=True)
class RelocationResult:
    src: Path
    dst: Path
    performed: bool  # False if dry-run
    verified: bool = False
    source_removed: bool = False
    reason: str = ""  # e.g., "copy only", "dry run"


@dataclass
class RunSummary:
    scanned: int = 0
    relocated: int = 0
    skipped: int = 0
    mismatched: int = 0
    results: List[RelocationResult] = field(default_factory=list)
