"""
S3 client wrapper: listing pages, puts and deletes against one bucket
"""
from typing import Any, NamedTuple, Optional

import boto3
from botocore.config import Config

from ..utils.logging import vlog


class RemoteObject(NamedTuple):
    key: str
    last_modified: Any  # datetime from boto3, or the raw listing string


class ListPage(NamedTuple):
    objects: list[RemoteObject]
    truncated: bool
    next_token: Optional[str]


class S3Client:
    """
    Thin wrapper around a boto3 S3 client bound to a single bucket.
    Calls are made one at a time; errors from botocore propagate unchanged.
    """

    def __init__(self, bucket: str, region: str,
                 aws_profile: Optional[str] = None,
                 endpoint_url: Optional[str] = None,
                 client=None):
        self.bucket = bucket
        self.region = region
        if client is None:
            session = boto3.session.Session(profile_name=aws_profile,
                                            region_name=region)
            client = session.client(
                "s3",
                endpoint_url=endpoint_url,
                config=Config(retries={"mode": "standard"}),
            )
        self._s3 = client

    # ── listing ────────────────────────────────────────────────────────────

    def list_page(self, token: Optional[str] = None) -> ListPage:
        """Fetch one page of the bucket listing, continuing from *token*."""
        kw: dict = dict(Bucket=self.bucket)
        if token:
            kw["ContinuationToken"] = token
        resp = self._s3.list_objects_v2(**kw)
        objects = [RemoteObject(o["Key"], o["LastModified"])
                   for o in resp.get("Contents", [])]
        vlog(f"[list] page with {len(objects)} object(s)")
        return ListPage(
            objects=objects,
            truncated=bool(resp.get("IsTruncated", False)),
            next_token=resp.get("NextContinuationToken"),
        )

    # ── writes ─────────────────────────────────────────────────────────────

    def put_object(self, key: str, body: bytes,
                   content_type: Optional[str] = None,
                   cache_control: Optional[str] = None,
                   acl: Optional[str] = None):
        kw: dict = dict(Bucket=self.bucket, Key=key, Body=body)
        if content_type:
            kw["ContentType"] = content_type
        if cache_control:
            kw["CacheControl"] = cache_control
        if acl:
            kw["ACL"] = acl
        self._s3.put_object(**kw)

    def delete_object(self, key: str):
        self._s3.delete_object(Bucket=self.bucket, Key=key)
