from pathlib import Path
import argparse
import logging
import sys

from archiver.config import DEFAULT_CONFIG_FILE, load_config
from archiver.errors import ArchiverError
from archiver.logger import setup_logging
from archiver.runner import ArchiveRun

logger = logging.getLogger("archiver.main")

def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Archive files older than the configured limit into <output>/L<line>_<station>/<year>/<month>/<day>/.")
    p.add_argument("--config", default=DEFAULT_CONFIG_FILE, help=f"Path to the TOML config (default {DEFAULT_CONFIG_FILE})")
    p.add_argument("--dry-run", action="store_true", help="Only show where files would go.")
    p.add_argument("-v", "--verbose", action="store_true", help="Also log skipped files")
    return p.parse_args(argv)

def archive_flow(config_path: Path, dry_run: bool) -> None:
    config = load_config(config_path)
    logger.debug("Loaded config: %s", config)

    summary = ArchiveRun(config, dry_run=dry_run).run()

    if dry_run:
        moved = f"Would relocate {len(summary.results)}"
    else:
        moved = f"Relocated {summary.relocated}"
    print(f"Done. Scanned {summary.scanned} files. {moved}, "
          f"skipped {summary.skipped}, checksum failures {summary.mismatched}.")

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        archive_flow(Path(args.config), args.dry_run)
    except (ArchiverError, OSError) as e:
        logger.error("Aborted: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
