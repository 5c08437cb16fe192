#!/usr/bin/env python3
"""
Host Diff - compare point-in-time snapshots of a host's exposed services.

This is the command-line entry point.
"""

import sys
import json
import logging
from pathlib import Path

from hostdiff import HostDiffError, HostDiffService, compare_snapshots
from hostdiff.models import DiffReport
from hostdiff.parsers import decode_pair
from hostdiff.reports import JsonReportGenerator, TextReportGenerator
from hostdiff.storage import SnapshotStore
from config import DEFAULT_SETTINGS, HostDiffSettings, LOG_FORMAT

logger = logging.getLogger("hostdiff.cli")


def compare_files(path_a: str, path_b: str) -> tuple:
    """Diff two snapshot files on disk. Returns (report, metadata)."""
    content_a = Path(path_a).read_bytes()
    content_b = Path(path_b).read_bytes()

    snapshot_a, snapshot_b = decode_pair(content_a, content_b)
    report = compare_snapshots(snapshot_a, snapshot_b)

    metadata = {
        "address": snapshot_a.address or snapshot_b.address,
        "timestamp_a": snapshot_a.capture_timestamp,
        "timestamp_b": snapshot_b.capture_timestamp,
        "source_a": str(path_a),
        "source_b": str(path_b)
    }
    return report, metadata


def emit_report(report: DiffReport, metadata: dict, fmt: str, output_dir: str = None):
    """Print a report, or save it when an output directory is given."""
    generator_class = JsonReportGenerator if fmt == "json" else TextReportGenerator
    generator = generator_class(output_dir or DEFAULT_SETTINGS.report.output_dir)
    if fmt == "json" or output_dir:
        content = generator.generate(report, metadata)
    else:
        content = report.summary

    if output_dir:
        name = f"diff_{(metadata.get('address') or 'host').replace('.', '-')}"
        path = generator.save(content, name)
        print(f"Report saved: {path}")
    else:
        print(content.rstrip("\n"))


def run_with_args(argv=None) -> int:
    """Run the CLI with command-line arguments."""
    import argparse

    settings = HostDiffSettings.from_env()

    parser = argparse.ArgumentParser(
        description="Compare host snapshots and track exposed-surface changes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --compare old.json new.json
  python main.py --upload host_10.0.0.1_2025-09-10T03-00-00Z.json
  python main.py --history 10.0.0.1
  python main.py --compare-ids 1 2 --format json --output data/reports
  python main.py --compare old.json new.json --output
        """
    )

    parser.add_argument(
        "--compare", "-c",
        nargs=2,
        metavar=("SNAPSHOT_A", "SNAPSHOT_B"),
        help="Compare two snapshot files directly"
    )
    parser.add_argument(
        "--upload", "-u",
        nargs="+",
        help="Store snapshot file(s) named host_<ip>_<timestamp>.json"
    )
    parser.add_argument(
        "--history",
        metavar="ADDRESS",
        help="List stored snapshots for an address"
    )
    parser.add_argument(
        "--compare-ids",
        nargs=2,
        metavar=("ID_A", "ID_B"),
        help="Compare two stored snapshots"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default=settings.report.default_format,
        help="Report format (default: text)"
    )
    parser.add_argument(
        "--output", "-o",
        nargs="?",
        const=settings.report.output_dir,
        metavar="DIR",
        help=f"Save the report instead of printing it (default dir: {settings.report.output_dir})"
    )
    parser.add_argument(
        "--db",
        default=settings.storage.db_path,
        help=f"Snapshot database path (default: {settings.storage.db_path})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)

    try:
        if args.compare:
            report, metadata = compare_files(*args.compare)
            emit_report(report, metadata, args.format, args.output)
            return 0

        if not (args.upload or args.history or args.compare_ids):
            parser.print_help()
            return 0

        with SnapshotStore(args.db) as store:
            service = HostDiffService(store)

            for file_path in args.upload or []:
                path = Path(file_path)
                info = service.upload_snapshot(path.name, path.read_bytes())
                print(f"Stored {path.name} as snapshot {info.id} ({info.address} @ {info.timestamp})")

            if args.history:
                snapshots = service.get_host_history(args.history)
                if args.format == "json":
                    print(json.dumps([s.to_dict() for s in snapshots], indent=2))
                elif not snapshots:
                    print(f"No snapshots stored for {args.history}")
                else:
                    for s in snapshots:
                        print(f"  {s.id:>6}  {s.timestamp}")

            if args.compare_ids:
                id_a, id_b = args.compare_ids
                report = service.compare_snapshots(id_a, id_b)
                stored_a = store.get_by_id(id_a)
                stored_b = store.get_by_id(id_b)
                metadata = {
                    "address": stored_a.address,
                    "timestamp_a": stored_a.timestamp,
                    "timestamp_b": stored_b.timestamp,
                    "snapshot_a": id_a,
                    "snapshot_b": id_b
                }
                emit_report(report, metadata, args.format, args.output)

    except HostDiffError as e:
        logger.error(e.detail)
        return 1
    except OSError as e:
        logger.error(f"Cannot read file: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run_with_args())
