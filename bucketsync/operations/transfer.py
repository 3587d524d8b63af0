"""
Upload of a single local file
"""
from typing import TYPE_CHECKING
from .. import config as _cfg
from ..utils import media_types
from ..utils.logging import vlog, warn, report_upload

if TYPE_CHECKING:
    from ..core.s3_client import S3Client
    from .scanner import LocalFile


def cache_control_for(max_age: int):
    """Cache-Control header value, or None when max-age is not positive."""
    if max_age and max_age > 0:
        return f"max-age={max_age}"
    return None


def content_type_for(local: "LocalFile"):
    """Inferred media type of *local*, or None (with a warning) if unknown."""
    ext = local.path.suffix.lstrip(".").lower()
    media_type = media_types.lookup(ext)
    if media_type == media_types.UNKNOWN:
        warn(f"could not infer content type for {local.path}")
        return None
    return media_type


def upload_file(client: "S3Client", local: "LocalFile", key: str, max_age: int):
    """Read *local* whole and put it under *key* as a public-read object."""
    body = local.path.read_bytes()
    content_type = content_type_for(local)
    client.put_object(
        key,
        body,
        content_type=content_type,
        cache_control=cache_control_for(max_age),
        acl=_cfg.ACL,
    )
    vlog(f"  [PUT ✓] {key} ({len(body)} bytes, {content_type or 'no content type'})")
    report_upload(local.path)
