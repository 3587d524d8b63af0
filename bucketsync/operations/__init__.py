"""Operations (inventory, keys, scan, transfer, delete)"""
from .inventory import fetch_remote_inventory, parse_last_modified
from .keys import derive_key, has_legal_name
from .scanner import LocalFile, local_list_all
from .transfer import upload_file
from .delete import stale_keys, confirm_and_delete

__all__ = [
    "fetch_remote_inventory", "parse_last_modified",
    "derive_key", "has_legal_name",
    "LocalFile", "local_list_all",
    "upload_file",
    "stale_keys", "confirm_and_delete",
]
