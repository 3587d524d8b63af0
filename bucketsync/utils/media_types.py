"""
Media type lookup by file extension
"""
import mimetypes

from .. import config as _cfg

UNKNOWN = "unknown"

mimetypes.init()


def lookup(extension: str) -> str:
    """
    Return the media type for a lowercase extension (without the dot),
    or UNKNOWN when neither the registered nor the system table knows it.
    """
    if not extension:
        return UNKNOWN
    if extension in _cfg.EXTRA_MIME_TYPES:
        return _cfg.EXTRA_MIME_TYPES[extension]
    return mimetypes.types_map.get(f".{extension}", UNKNOWN)
