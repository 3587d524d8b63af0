#!/usr/bin/env python3
"""
bucketsync  —  one-way directory → S3 bucket mirroring
=====================================================

Uploads every file under --files whose object in --bucket is missing or
older, as public-read. '.html' files are stored without the extension.
With --delete-stale, each remote object that has no local file is offered
for deletion, one prompt per object.

Settings may also come from a .bucketsync YAML file (searched upward from
the current directory); command-line flags take precedence:

  profiles:
    - name: default
      bucket: my-site
      region: eu-west-1
      files: ./public
      max_age: 3600
"""
import sys
import argparse
from pathlib import Path

import yaml


def _load_settings(args):
    """Merge global config, .bucketsync profile and flags into config."""
    import bucketsync.config as _cfg

    base = _cfg.load_global_config().get("defaults", {})
    config_path = Path(args.config) if args.config else _cfg.find_config()
    if args.config and not config_path.is_file():
        print(f"error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    data = _cfg.load_config_file(config_path) if config_path else {}
    if args.verbose and config_path:
        print(f"[config] Using {config_path}", file=sys.stderr)
    profile = _cfg.get_profile(data, args.profile, base_defaults=base)
    if config_path and profile.get("files"):
        # relative 'files' entries are relative to the config file
        files = Path(str(profile["files"])).expanduser()
        if not files.is_absolute():
            profile["files"] = str(config_path.parent / files)
    _cfg.apply_profile(profile)

    if args.bucket:
        _cfg.BUCKET = args.bucket
    if args.region:
        _cfg.REGION = args.region
    if args.files:
        _cfg.FILES_ROOT = Path(args.files).expanduser()
    if args.max_age is not None:
        _cfg.MAX_AGE = args.max_age
    if args.delete_stale is not None:
        _cfg.DELETE_STALE = args.delete_stale
    return _cfg


def main(argv=None):
    """CLI entry point for bucketsync"""
    parser = argparse.ArgumentParser(
        prog="bucketsync",
        description="Mirror a local directory into an S3 bucket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--bucket", metavar="NAME",
                        help="Destination bucket (required)")
    parser.add_argument("--region", metavar="REGION",
                        help="Bucket region (required)")
    parser.add_argument("--files", metavar="PATH",
                        help="Local directory to mirror (required)")
    parser.add_argument("--delete-stale", action=argparse.BooleanOptionalAction,
                        default=None,
                        help="Offer remote objects with no local file for deletion "
                             "(--no-delete-stale overrides the profile)")
    parser.add_argument("--force", action="store_true",
                        help="Upload every file regardless of timestamps")
    parser.add_argument("--max-age", type=int, default=None, metavar="SECONDS",
                        help="Cache-Control max-age for uploaded objects (default: none)")
    parser.add_argument("--profile", metavar="NAME", default="default",
                        help="Profile from .bucketsync to use (default: default)")
    parser.add_argument("--config", metavar="PATH",
                        help="Explicit .bucketsync file (default: search upward)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show every file considered, not just uploads")

    args = parser.parse_args(argv)
    if args.max_age is not None and args.max_age < 0:
        parser.error("--max-age must not be negative")

    try:
        cfg = _load_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"error: could not load configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    missing = [flag for flag, value in (("--bucket", cfg.BUCKET),
                                        ("--region", cfg.REGION),
                                        ("--files", cfg.FILES_ROOT))
               if not value]
    if missing:
        parser.error(f"the following arguments are required: {', '.join(missing)}")

    root = Path(cfg.FILES_ROOT).resolve()
    if not root.is_dir():
        print(f"error: --files {cfg.FILES_ROOT} is not an existing directory",
              file=sys.stderr)
        sys.exit(1)

    from bucketsync.core.s3_client import S3Client
    from bucketsync.core.sync_engine import run_sync

    client = S3Client(cfg.BUCKET, cfg.REGION,
                      aws_profile=cfg.AWS_PROFILE,
                      endpoint_url=cfg.ENDPOINT_URL)
    run_sync(
        client,
        root,
        force=args.force,
        max_age=cfg.MAX_AGE,
        delete_stale=cfg.DELETE_STALE,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
