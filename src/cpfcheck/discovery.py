"""Input file discovery"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

INPUT_SUFFIX = '.txt'


def list_txt_files(directory: str | Path) -> list[Path]:
    """
    List the .txt files directly inside directory, sorted by name.

    Subdirectories are not searched. A missing or unreadable directory yields
    an empty list.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.warning(f'Cannot list input directory {directory}: {e}')
        return []

    return sorted(p for p in entries if p.name.endswith(INPUT_SUFFIX) and p.is_file())
