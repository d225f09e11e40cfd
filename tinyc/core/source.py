import logging
from pathlib import Path
from typing import Union

from ..utils.errors import SourceError

logger = logging.getLogger(__name__)


def read_source(path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """Read a whole source file into memory"""
    path = Path(path)
    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            source = f.read()
    except FileNotFoundError:
        raise SourceError(str(path), "file not found") from None
    except IsADirectoryError:
        raise SourceError(str(path), "is a directory") from None
    except PermissionError:
        raise SourceError(str(path), "permission denied") from None
    except UnicodeDecodeError as e:
        raise SourceError(str(path), f"not valid {encoding} ({e.reason} at byte {e.start})") from None
    except OSError as e:
        raise SourceError(str(path), e.strerror or str(e)) from e

    logger.debug("loaded %s (%d characters)", path, len(source))
    logger.debug("source of %s:\n%s", path, source)
    return source
