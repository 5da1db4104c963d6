#!/usr/bin/env python3
"""
torrentmeta - decode and validate BitTorrent metainfo (.torrent) files.
Main entry point for the application.
"""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from torrentmeta.common.logging import DEFAULT_LOG_DIR, config_logging
from torrentmeta.torrent.errors import MetainfoError
from torrentmeta.torrent.metadata import Metainfo
from torrentmeta.torrent.parser import parse_torrent_file
import logging

logger = logging.getLogger(__name__)


def format_summary(metadata: Metainfo) -> str:
    info = metadata.info
    lines = [
        "=" * 60,
        f"Torrent: {info.name}",
        f"Mode: {'multi-file' if metadata.is_multi_file else 'single-file'}",
        f"Size: {info.total_length} bytes",
        f"Pieces: {info.piece_count} x {info.piece_length} bytes",
        f"Private: {'yes' if info.is_private else 'no'}",
        f"Tracker: {metadata.announce}",
        f"Created: {metadata.creation_date}",
    ]
    if metadata.created_by is not None:
        lines.append(f"Created by: {metadata.created_by}")
    if metadata.comment is not None:
        lines.append(f"Comment: {metadata.comment}")
    if metadata.is_multi_file:
        lines.append("Files:")
        lines.extend(f"  {f.joined_path} ({f.length} bytes)" for f in info.files)
    lines.append("=" * 60)
    return "\n".join(lines)


def format_json(metadata: Metainfo) -> str:
    document = dataclasses.asdict(metadata)
    document["multi_file"] = metadata.is_multi_file
    return json.dumps(document, indent=2)


def format_error(error: MetainfoError) -> str:
    if isinstance(error.__cause__, MetainfoError):
        return f"{error} (multi-file layout: {error.__cause__})"
    return str(error)


def main(argv: list[str] | None = None):
    """Main entry point for the torrentmeta command."""
    parser = argparse.ArgumentParser(
        description="Decode and validate a BitTorrent metainfo file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ubuntu.torrent
  %(prog)s album.torrent --json
  %(prog)s file.torrent -v
        """,
    )

    parser.add_argument("torrent", type=Path, help="Path to the .torrent file")

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the decoded document as JSON",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    parser.add_argument(
        "--log-file",
        default="torrentmeta.log.jsonl",
        help="Name of the JSON log file (default: torrentmeta.log.jsonl)",
    )

    parser.add_argument(
        "--log-dir",
        type=Path,
        default=DEFAULT_LOG_DIR,
        help=f"Directory for log files (default: {DEFAULT_LOG_DIR})",
    )

    args = parser.parse_args(argv)

    if not args.torrent.exists():
        print(f"Error: Torrent file '{args.torrent}' not found")
        sys.exit(1)

    config_logging(args.log_file, args.log_dir, args.verbose)

    try:
        metadata = parse_torrent_file(args.torrent)
    except MetainfoError as e:
        # below the console threshold unless --verbose; the JSON log keeps the traceback
        logger.info(f"Could not decode {args.torrent}: {e}", exc_info=True)
        print(f"Error: {format_error(e)}")
        sys.exit(1)

    print(format_json(metadata) if args.json else format_summary(metadata))


if __name__ == "__main__":
    main()
