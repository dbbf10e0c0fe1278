from pathlib import Path
from datetime import datetime

from .models import FileCandidate, Station

class PathClassifier:
    """Maps a file's modification time to output/L<line>_<tag>/<year>/<month>/<day>."""
    def __init__(self, output_root: Path, station: Station):
        self.output_root = output_root
        self.station = station

    def destination_dir(self, mtime: datetime) -> Path:
        # No zero padding: 2023/6/1
        return (
            self.output_root
            / self.station.folder_name
            / str(mtime.year)
            / str(mtime.month)
            / str(mtime.day)
        )

    def destination_for(self, rec: FileCandidate) -> Path:
        return self.destination_dir(rec.mtime) / rec.name
