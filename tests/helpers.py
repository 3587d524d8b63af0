"""
Shared test doubles for bucketsync tests.
"""
import os
from datetime import datetime, timezone
from pathlib import Path

from bucketsync.core.s3_client import ListPage, RemoteObject


class FakeS3:
    """
    In-memory stand-in for S3Client.
    Every put stamps the object with the current fake clock value.
    """

    def __init__(self, objects=None, page_size=1000, clock=1_000_000.0):
        self.bucket = "test-bucket"
        self.region = "us-east-1"
        self.objects = dict(objects or {})  # key -> epoch seconds
        self.page_size = page_size
        self.clock = clock
        self.puts = []
        self.deletes = []
        self.list_calls = []

    def list_page(self, token=None):
        self.list_calls.append(token)
        keys = sorted(self.objects)
        start = int(token or 0)
        chunk = keys[start:start + self.page_size]
        more = start + self.page_size < len(keys)
        return ListPage(
            objects=[RemoteObject(k, datetime.fromtimestamp(self.objects[k], tz=timezone.utc))
                     for k in chunk],
            truncated=more,
            next_token=str(start + self.page_size) if more else None,
        )

    def put_object(self, key, body, content_type=None, cache_control=None, acl=None):
        self.puts.append(dict(key=key, body=body, content_type=content_type,
                              cache_control=cache_control, acl=acl))
        self.objects[key] = self.clock

    def delete_object(self, key):
        self.deletes.append(key)
        self.objects.pop(key, None)


def write_file(root: Path, rel: str, content: str = "x", mtime: float = 100.0) -> Path:
    """Create root/rel with the given content and modification time."""
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    os.utime(p, (mtime, mtime))
    return p


def answers(*replies):
    """Build an ask() callable that returns *replies* in order and records prompts."""
    replies = list(replies)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return replies.pop(0) if replies else ""

    ask.prompts = prompts
    return ask
