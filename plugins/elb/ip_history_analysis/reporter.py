"""
ALB IP 이력 보고서 출력

- JSON / CSV: 문자열 렌더링 또는 파일 저장
- Excel: Summary + IP History 시트
"""

from __future__ import annotations

import csv
import io
import json
import os
from datetime import datetime

from .types import IPHistoryResult

CSV_FIELDS = ["event_time", "private_ip_address"]


def render_json(result: IPHistoryResult) -> str:
    """JSON 문자열 생성"""
    data = {
        "load_balancer": result.load_balancer,
        "region": result.region,
        "scanned": result.scanned,
        "truncated": result.truncated,
        "entries": [e.to_dict() for e in result.entries],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def render_csv(result: IPHistoryResult) -> str:
    """CSV 문자열 생성"""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for entry in result.entries:
        writer.writerow(entry.to_dict())
    return buffer.getvalue()


def write_json(result: IPHistoryResult, filepath: str) -> str:
    """JSON 파일 저장"""
    _ensure_parent(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_json(result))
    return filepath


def write_csv(result: IPHistoryResult, filepath: str) -> str:
    """CSV 파일 저장 (Excel 호환 BOM 포함)"""
    _ensure_parent(filepath)
    with open(filepath, "w", encoding="utf-8-sig", newline="") as f:
        f.write(render_csv(result))
    return filepath


def write_excel(result: IPHistoryResult, output_dir: str) -> str:
    """Excel 보고서 생성

    Args:
        result: IP 이력 조회 결과
        output_dir: 출력 디렉토리

    Returns:
        생성된 파일 경로
    """
    from openpyxl import Workbook
    from openpyxl.styles import Font, PatternFill
    from openpyxl.utils import get_column_letter

    wb = Workbook()
    if wb.active:
        wb.remove(wb.active)

    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=11)
    warning_fill = PatternFill(start_color="FFC000", end_color="FFC000", fill_type="solid")

    # ========== Summary 시트 ==========
    ws = wb.create_sheet("Summary")
    ws["A1"] = "ALB IP 이력 보고서"
    ws["A1"].font = Font(bold=True, size=14)

    summary_rows = [
        ("Load Balancer", result.load_balancer),
        ("Region", result.region),
        ("조회 이벤트", result.scanned),
        ("매칭 이벤트", len(result.entries)),
        ("고유 IP", len(result.unique_ips)),
        ("이력 일부 누락", "예" if result.truncated else "아니오"),
    ]
    for row, (label, value) in enumerate(summary_rows, start=3):
        ws.cell(row=row, column=1, value=label).font = Font(bold=True)
        ws.cell(row=row, column=2, value=value)
    if result.truncated:
        ws.cell(row=3 + len(summary_rows) - 1, column=2).fill = warning_fill

    # ========== IP History 시트 ==========
    ws_history = wb.create_sheet("IP History")
    headers = ["#", "시간 (UTC)", "Private IP"]
    for col, h in enumerate(headers, 1):
        ws_history.cell(row=1, column=col, value=h).fill = header_fill
        ws_history.cell(row=1, column=col).font = header_font

    for idx, entry in enumerate(result.entries, start=1):
        ws_history.cell(row=idx + 1, column=1, value=idx)
        ws_history.cell(row=idx + 1, column=2, value=entry.event_time.strftime("%Y-%m-%d %H:%M:%S"))
        ws_history.cell(row=idx + 1, column=3, value=entry.private_ip_address)

    # 열 너비 조정
    for sheet in wb.worksheets:
        for col in sheet.columns:
            max_len = max(len(str(c.value) if c.value is not None else "") for c in col)
            col_idx = col[0].column
            if col_idx:
                sheet.column_dimensions[get_column_letter(col_idx)].width = min(max(max_len + 2, 10), 50)
    ws_history.freeze_panes = "A2"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = os.path.join(output_dir, f"ALB_IP_History_{result.load_balancer}_{timestamp}.xlsx")
    os.makedirs(output_dir, exist_ok=True)
    wb.save(filepath)
    return filepath


def _ensure_parent(filepath: str) -> None:
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)
