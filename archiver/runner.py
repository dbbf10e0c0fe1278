from datetime import datetime
from typing import Optional
import logging

from .classifier import PathClassifier
from .errors import ChecksumMismatchError
from .models import Config, RunSummary
from .mover import VerifiedMover
from .scanner import AgeFilter, FolderScanner
from .utils import validate_source_dest

logger = logging.getLogger(__name__)

class ArchiveRun:
    """One pass over the input folder: walk, age check, relocate.

    Files are relocated as soon as they are found. A checksum mismatch only
    skips that file; every other error ends the run.
    """
    def __init__(self, config: Config, dry_run: bool = False):
        self.config = config
        self.scanner = FolderScanner(config.input_dir, exclude=[config.output_dir])
        self.age_filter = AgeFilter(config.time_limit)
        self.mover = VerifiedMover(
            PathClassifier(config.output_dir, config.station),
            only_copy=config.only_copy,
            dry_run=dry_run,
        )

    def run(self, now: Optional[datetime] = None) -> RunSummary:
        validate_source_dest(self.config.input_dir, self.config.output_dir)
        now = now or datetime.now().astimezone()
        summary = RunSummary()

        for rec in self.scanner.walk():
            summary.scanned += 1
            if not self.age_filter.qualifies(rec, now):
                logger.debug("Skipping (not old enough): %s", rec.path)
                summary.skipped += 1
                continue
            try:
                result = self.mover.move_one(rec)
            except ChecksumMismatchError as e:
                logger.warning("ERROR: checksum is NOK! Removed copied file %s, kept %s", e.dst, e.src)
                summary.mismatched += 1
                continue
            summary.results.append(result)
            if result.performed:
                summary.relocated += 1

        return summary
