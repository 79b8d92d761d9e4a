"""掃描結果的報告輸出。"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from ..models import RecordStatus, ScanRunResult

REPORT_FIELDNAMES = [
    "original_path",
    "staged_path",
    "status",
    "reason",
    "platform",
]


def build_report_name(prefix: str = "scan_report") -> str:
    return f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"


def write_records_csv(report_dir: Path, result: ScanRunResult) -> Path:
    report_dir.mkdir(parents=True, exist_ok=True)
    report_path = report_dir / build_report_name()
    with report_path.open("w", encoding="utf-8-sig", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=REPORT_FIELDNAMES)
        writer.writeheader()
        for record in result.records:
            writer.writerow(record.to_dict())
    return report_path


def count_by_status(result: ScanRunResult) -> dict[str, int]:
    counts = {status.value: 0 for status in RecordStatus}
    for record in result.records:
        counts[record.status.value] += 1
    return counts


def format_summary(result: ScanRunResult) -> str:
    by_status = count_by_status(result)
    lines = [
        "=== 掃描結果 ===",
        f"找到檔案: {result.total_found}",
        f"成功匯入: {result.imported}",
        f"略過: {result.skipped}（其中重複 {result.duplicates}）",
        f"失敗: {result.failed}",
        f"複製 / 解碼: {by_status['copied']} / {by_status['decoded']}",
    ]
    if result.truncated:
        lines.append("注意: 部分來源已達走訪上限，其餘檔案未掃描")
    for error in result.errors:
        lines.append(f"[{error.level.value}] {error.code}: {error.message}")
    return "\n".join(lines)
