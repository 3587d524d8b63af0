"""Core functionality"""
from .s3_client import S3Client, RemoteObject, ListPage
from .sync_engine import Decision, SyncResult, decide, sync_directory, run_sync

__all__ = [
    "S3Client", "RemoteObject", "ListPage",
    "Decision", "SyncResult", "decide", "sync_directory", "run_sync",
]
