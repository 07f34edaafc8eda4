"""
File Reader - Read raw CSV text from disk
"""

from pathlib import Path
from typing import Union
import logging

from ..core.errors import ReadError

logger = logging.getLogger(__name__)

FALLBACK_ENCODINGS = ('cp1252',)


def read_file_content(file_path: Union[str, Path]) -> str:
    """
    Read file content as string.

    Args:
        file_path: Path to the file

    Returns:
        File content as string

    Raises:
        ReadError: The file could not be opened or decoded
    """
    file_path = Path(file_path)
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise ReadError(f"Could not read {file_path.name}: {e.strerror or e}") from e

    # Try UTF-8 first (with or without BOM)
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        pass

    for encoding in FALLBACK_ENCODINGS:
        try:
            text = raw.decode(encoding)
            logger.debug(f"Decoded {file_path.name} as {encoding}")
            return text
        except UnicodeDecodeError:
            continue

    # latin-1 accepts any byte sequence
    logger.warning(f"Could not decode file {file_path} with common encodings, using latin-1")
    return raw.decode('latin-1')
