"""Declaration file reading and encoding detection."""

from pathlib import Path
from typing import Optional, Tuple


_BOMS = (
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe', 'utf-16-le'),
    (b'\xfe\xff', 'utf-16-be'),
)


def detect_file_encoding(data: bytes) -> str:
    """Pick the encoding to decode a declaration file with.

    A byte order mark wins. Otherwise the whole content must decode as UTF-8,
    so a multibyte character anywhere in the file is never split by a sample
    boundary; anything else is read as latin-1, which accepts every byte.

    Args:
        data: Complete file content.

    Returns:
        Encoding name (e.g., 'utf-8', 'utf-8-sig', 'latin-1').
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding

    try:
        data.decode('utf-8')
    except UnicodeDecodeError:
        return 'latin-1'
    return 'utf-8'


def is_declaration_file(filepath: Path) -> bool:
    """Check that a path points to an existing ``.d.ts`` file."""
    return filepath.name.endswith(".d.ts") and filepath.is_file()


def read_declaration(file_path: Path) -> Tuple[str, Optional[str]]:
    """Read a declaration file into memory.

    Read failures are reported through the returned error message instead of
    raised, so one unreadable provider never stops the others.

    Args:
        file_path: Path to the ``.d.ts`` file.

    Returns:
        Tuple of (content, error_message). error_message is None if successful.
    """
    try:
        with open(file_path, 'rb') as f:
            raw_data = f.read()

        encoding = detect_file_encoding(raw_data)
        return raw_data.decode(encoding, errors="replace"), None
    except OSError as e:
        return "", f"Error reading declaration file: {e}"
