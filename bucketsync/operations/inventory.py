"""
Remote inventory: the bucket's full listing as {key: last_modified_epoch}
"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from ..utils.logging import log

if TYPE_CHECKING:
    from ..core.s3_client import S3Client

# Listing timestamps are UTC with millisecond precision, e.g. 2024-05-01T12:30:45.000Z
LAST_MODIFIED_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def parse_last_modified(value) -> float:
    """Convert a listing timestamp to epoch seconds. Raises ValueError."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = datetime.strptime(value, LAST_MODIFIED_FORMAT)
    else:
        raise ValueError(f"unsupported last-modified value: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


def fetch_remote_inventory(client: "S3Client") -> dict[str, float]:
    """
    Page through the whole bucket listing.
    A timestamp that does not parse, or a truncated page with no
    continuation token, aborts the fetch.
    """
    inventory: dict[str, float] = {}
    token = None
    pages = 0
    while True:
        page = client.list_page(token)
        pages += 1
        for obj in page.objects:
            inventory[obj.key] = parse_last_modified(obj.last_modified)
        if not page.truncated:
            break
        if not page.next_token:
            # asking again without a token would restart from the first page
            raise ValueError("truncated listing without continuation token")
        token = page.next_token
    log(f"[list] {len(inventory)} remote object(s) in {pages} page(s)")
    return inventory
