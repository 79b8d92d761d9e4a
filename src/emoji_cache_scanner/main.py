from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import EmojiScanner
from .models import ScanRunOptions
from .utils import reporting

DEFAULT_LIBRARY_DIR = Path.home() / ".emoji-cache-scanner"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    print(f"emoji-cache-scanner v{__version__}")
    if args.command is None:
        parser.print_help()
        return 0

    config = ConfigManager(Path(args.config) if args.config else None)
    errors = config.validate_config()
    if errors:
        for error in errors:
            print(f"設定錯誤: {error}")
        return 2

    scanner = EmojiScanner.for_library(Path(args.library), config)
    if args.command == "sources":
        return _run_sources(scanner)
    if args.command == "show-config":
        return _run_show_config(scanner)
    if args.command == "save-config":
        return _run_save_config(args, scanner)
    return _run_scan(args, scanner)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji_cache_scanner")
    parser.add_argument("--config", help="Path to tuning config file", default=None)
    parser.add_argument("--library", help="Library folder", default=str(DEFAULT_LIBRARY_DIR))

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("sources", help="List known cache sources")
    subparsers.add_parser("show-config", help="Print saved scanner config")

    save = subparsers.add_parser("save-config", help="Update saved scanner config")
    save.add_argument("--enable", action="append", help="Enabled source id (repeatable)")
    save.add_argument("--custom-path", action="append", help="Custom scan folder (repeatable)")
    save.add_argument("--override", action="append", default=[], help="SOURCE_ID=PATH, empty PATH clears")
    save.add_argument("--category-map", action="append", default=[], help="PLATFORM=CATEGORY")
    save.add_argument("--merge-default", action=argparse.BooleanOptionalAction, default=None)
    save.add_argument("--auto-tag", action=argparse.BooleanOptionalAction, default=None)
    save.add_argument("--auto-scan", action=argparse.BooleanOptionalAction, default=None)

    scan = subparsers.add_parser("scan", help="Scan sources and import found stickers")
    scan.add_argument("--source", action="append", default=[], help="Source id (repeatable)")
    scan.add_argument("--enabled", action="store_true", help="Also scan sources enabled in config")
    scan.add_argument("--path", action="append", default=[], help="Extra folder (repeatable)")
    scan.add_argument("--category", default=None, help="Target category for this run")
    scan.add_argument("--keep-duplicates", action="store_true", help="Do not skip duplicates")
    scan.add_argument("--auto-tag", action=argparse.BooleanOptionalAction, default=None)
    scan.add_argument("--report", default=None, help="Write CSV report into this folder")

    return parser


def _parse_pairs(values: Sequence[str]) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values:
        key, sep, target = value.partition("=")
        if not sep or not key:
            raise SystemExit(f"格式錯誤（需為 KEY=VALUE）: {value}")
        pairs[key] = target
    return pairs


def _run_sources(scanner: EmojiScanner) -> int:
    for source in scanner.detect_sources():
        marker = "*" if source.recommended else " "
        state = "存在" if source.exists else "不存在"
        suffix = "（自訂路徑）" if source.is_override else ""
        print(f"{marker} {source.id:<22} {state:<4} {source.path}{suffix}")
    return 0


def _run_show_config(scanner: EmojiScanner) -> int:
    print(json.dumps(scanner.get_config().to_dict(), ensure_ascii=False, indent=2))
    return 0


def _run_save_config(args: argparse.Namespace, scanner: EmojiScanner) -> int:
    partial: dict[str, object] = {}
    if args.enable is not None:
        partial["enabled_sources"] = args.enable
    if args.custom_path is not None:
        partial["custom_paths"] = args.custom_path
    if args.override:
        partial["source_overrides"] = _parse_pairs(args.override)
    if args.category_map:
        partial["target_category_map"] = _parse_pairs(args.category_map)
    if args.merge_default is not None:
        partial["merge_into_default_category"] = args.merge_default
    if args.auto_tag is not None:
        partial["auto_tag_platform"] = args.auto_tag
    if args.auto_scan is not None:
        partial["auto_scan_on_launch"] = args.auto_scan

    try:
        saved = scanner.save_config(partial)
    except ValueError as exc:
        print(exc)
        return 2
    print(json.dumps(saved.to_dict(), ensure_ascii=False, indent=2))
    return 0


def _run_scan(args: argparse.Namespace, scanner: EmojiScanner) -> int:
    source_ids = list(args.source)
    if args.enabled:
        source_ids.extend(scanner.get_config().enabled_sources)

    options = ScanRunOptions(
        source_ids=source_ids,
        additional_paths=list(args.path),
        skip_duplicates=not args.keep_duplicates,
        auto_tag_platform=args.auto_tag,
        target_category=args.category,
    )
    result = scanner.run_scan(options)
    print(reporting.format_summary(result))
    if args.report:
        report_path = reporting.write_records_csv(Path(args.report), result)
        print(f"Report written to: {report_path}")
    return 0 if result.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
