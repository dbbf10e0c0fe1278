from pathlib import Path
import hashlib

CHUNK_SIZE = 1024 * 1024

def file_digest(path: Path, chunk_size: int = CHUNK_SIZE) -> bytes:
    """BLAKE2b-512 digest of the whole file content."""
    hasher = hashlib.blake2b(digest_size=64)
    with path.open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.digest()
