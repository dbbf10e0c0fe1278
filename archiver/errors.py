class ArchiverError(Exception):
    """Base error for the project."""

class ConfigError(ArchiverError):
    pass

class InvalidPathError(ArchiverError):
    pass

class MetadataError(ArchiverError):
    """File metadata could not be read during the walk."""

class InsufficientSpaceError(ArchiverError):
    pass

class ChecksumMismatchError(ArchiverError):
    """Copied file does not match the source. The copy has already been removed."""
    def __init__(self, src, dst):
        super().__init__(f"Checksum mismatch: {src} -> {dst}")
        self.src = src
        self.dst = dst
