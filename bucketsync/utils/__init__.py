"""Utilities (logging, media types, ignore patterns)"""
from .logging import log, vlog, warn, set_verbose, report_upload
from .ignore_patterns import load_ignore_patterns, is_ignored
from . import media_types

__all__ = [
    "log", "vlog", "warn", "set_verbose", "report_upload",
    "load_ignore_patterns", "is_ignored",
    "media_types",
]
