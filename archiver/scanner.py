from pathlib import Path
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Set, Tuple
import logging
import stat

from .errors import MetadataError
from .models import FileCandidate

logger = logging.getLogger(__name__)

class FolderScanner:
    """Walks a folder depth-first and yields a FileCandidate for every regular file.

    Subfolders, symlinked ones included, are handled with an explicit stack of
    directory iterators, so a subfolder is fully walked before the remaining
    entries of its parent, the same order a recursive walk gives. Each folder
    is entered once; folders listed in `exclude` are never entered.
    """

    def __init__(self, root: Path, exclude: Iterable[Path] = ()):
        self.root = root
        self.exclude = list(exclude)

    def walk(self) -> Iterator[FileCandidate]:
        visited: Set[Tuple[int, int]] = {self._dir_key(self.root)}
        excluded = {self._dir_key(p) for p in self.exclude if p.is_dir()}
        stack: List[Iterator[Path]] = [self.root.iterdir()]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                st = entry.stat()
            except OSError as e:
                raise MetadataError(f"Could not get file metadata for {entry}: {e}") from e

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in excluded:
                    logger.info("Skipping %s: points into the archive folder", entry)
                    continue
                if key in visited:
                    logger.warning("Skipping %s: folder already walked", entry)
                    continue
                visited.add(key)
                stack.append(entry.iterdir())
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            yield FileCandidate(
                path=entry,
                name=entry.name,
                size=st.st_size,
                mtime=datetime.fromtimestamp(st.st_mtime).astimezone(),
            )

    @staticmethod
    def _dir_key(path: Path) -> Tuple[int, int]:
        st = path.stat()
        return st.st_dev, st.st_ino

    def scan(self) -> List[FileCandidate]:
        return list(self.walk())


class AgeFilter:
    """Strict age check: a file qualifies only if now - mtime > time_limit days."""

    def __init__(self, time_limit_days: int):
        self.time_limit = timedelta(days=time_limit_days)

    def qualifies(self, rec: FileCandidate, now: datetime) -> bool:
        return now - rec.mtime > self.time_limit
