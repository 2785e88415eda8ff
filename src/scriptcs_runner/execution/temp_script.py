"""
Temporary script artifacts for inline scripts.
"""
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..error.exceptions import ErrorContext, ScriptMaterializationError

logger = logging.getLogger(__name__)

TEMP_SCRIPT_PREFIX = "ScriptCS_"
TEMP_SCRIPT_SUFFIX = ".csx"


def discard(path: Path) -> None:
    """Best-effort removal; failures never reach the caller."""
    try:
        path.unlink()
    except OSError as e:
        logger.debug(f"Could not remove temporary script {path}: {e}")


@contextmanager
def materialize_script(
    content: str,
    prefix: str = TEMP_SCRIPT_PREFIX,
    suffix: str = TEMP_SCRIPT_SUFFIX,
    directory: Optional[str] = None
) -> Iterator[Path]:
    """
    Write an inline script to a uniquely named temporary file.

    The file exists for the duration of the ``with`` block and is removed
    when it exits, whatever way it exits.

    Args:
        content: Script text, written exactly as given
        prefix: File name prefix
        suffix: File name extension
        directory: Parent directory, the platform temp directory by default

    Yields:
        Absolute path of the script file

    Raises:
        ScriptMaterializationError: If the file cannot be created or written
    """
    path = None
    try:
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=directory)
        path = Path(name).resolve()
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, UnicodeError) as e:
        if path is not None:
            discard(path)
        raise ScriptMaterializationError(
            f"Could not write temporary script: {e}",
            ErrorContext(component="temp_script", operation="materialize_script"),
            details={"path": str(path) if path else None}
        ) from e
    except BaseException:
        if path is not None:
            discard(path)
        raise

    logger.debug(f"Wrote inline script to {path}")
    try:
        yield path
    finally:
        discard(path)
