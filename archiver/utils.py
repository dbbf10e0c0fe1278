from pathlib import Path
import shutil
from .errors import InsufficientSpaceError, InvalidPathError


def validate_source_dest(src: Path, dest: Path) -> None:
    if not src.exists():
        raise InvalidPathError(f'Input path "{src}" does NOT exist!')
    if not src.is_dir():
        raise InvalidPathError(f'Input path "{src}" is not a directory!')
    if not dest.exists():
        raise InvalidPathError(f'Output path "{dest}" does NOT exist!')
    if not dest.is_dir():
        raise InvalidPathError(f'Output path "{dest}" is not a directory!')
    # Archive inside the input tree would be walked again on the same run
    try:
        dest.resolve().relative_to(src.resolve())
    except ValueError:
        return
    raise InvalidPathError("Output folder cannot be inside the input folder.")

def check_free_space(dest: Path, required_bytes: int) -> None:
    total, used, free = shutil.disk_usage(dest)
    if free < required_bytes:
        raise InsufficientSpaceError(
            f"Not enough disk space in {dest}: need {required_bytes} bytes, {free} free.")
