"""
Stale object deletion with per-key confirmation
"""
import sys
from typing import Callable, Optional, TYPE_CHECKING
from ..utils.logging import log

if TYPE_CHECKING:
    from ..core.s3_client import S3Client


def _ask_stderr(prompt: str) -> str:
    """Prompt on stderr and read one line from stdin ('' on EOF)."""
    print(prompt, end="", file=sys.stderr, flush=True)
    return sys.stdin.readline()


def stale_keys(remote: dict[str, float], local: dict[str, float]) -> list[str]:
    """Remote keys with no local counterpart, sorted."""
    return sorted(set(remote) - set(local))


def confirm_and_delete(client: "S3Client",
                       remote: dict[str, float],
                       local: dict[str, float],
                       ask: Optional[Callable[[str], str]] = None) -> list[str]:
    """
    Offer every stale key for deletion, one prompt at a time.
    Only an answer of exactly 'y' deletes. Returns the deleted keys.
    """
    ask = ask or _ask_stderr
    candidates = stale_keys(remote, local)
    if not candidates:
        log("[del] No stale remote objects.")
        return []

    log(f"[del] {len(candidates)} stale remote object(s)")
    deleted: list[str] = []
    for key in candidates:
        answer = ask(f"Delete stale object {key}? [y/N]: ")
        if answer.strip() != "y":
            continue
        client.delete_object(key)
        deleted.append(key)
        print(f"  deleted {key}", file=sys.stderr, flush=True)
    return deleted
