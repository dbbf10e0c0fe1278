from pathlib import Path
import logging
import shutil

from .checksum import file_digest
from .classifier import PathClassifier
from .errors import ChecksumMismatchError
from .models import FileCandidate, RelocationResult
from .utils import check_free_space

logger = logging.getLogger(__name__)

class VerifiedMover:
    """Copies a file into the archive, checks both digests, then removes the source.

    Anything that goes wrong besides a digest mismatch (mkdir, copy, delete)
    is left to propagate and stops the run.
    """
    def __init__(self, classifier: PathClassifier, only_copy: bool = False, dry_run: bool = False):
        self.classifier = classifier
        self.only_copy = only_copy
        self.dry_run = dry_run

    def move_one(self, rec: FileCandidate) -> RelocationResult:
        dest_file = self.classifier.destination_for(rec)
        logger.info("%s (modified %s) -> %s", rec.path, rec.mtime.isoformat(timespec="seconds"), dest_file)

        if self.dry_run:
            return RelocationResult(rec.path, dest_file, performed=False, reason="dry run")

        dest_file.parent.mkdir(parents=True, exist_ok=True)
        reclaimed = dest_file.stat().st_size if dest_file.exists() else 0
        check_free_space(dest_file.parent, rec.size - reclaimed)

        src_hash = file_digest(rec.path)
        # Overwrites an existing file with the same name
        shutil.copy(str(rec.path), str(dest_file))
        dst_hash = file_digest(dest_file)

        if src_hash != dst_hash:
            logger.debug("Removing bad copy %s", dest_file)
            dest_file.unlink()
            raise ChecksumMismatchError(rec.path, dest_file)

        if self.only_copy:
            logger.info("Checksum is OK!")
            return RelocationResult(rec.path, dest_file, performed=True, verified=True, reason="copy only")

        logger.info("Checksum is OK! Removing the original file!")
        rec.path.unlink()
        return RelocationResult(rec.path, dest_file, performed=True, verified=True, source_removed=True)
