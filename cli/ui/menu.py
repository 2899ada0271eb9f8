"""
cli/ui/menu.py - 대화형 메뉴 UI

questionary 선택 메뉴와 rich 테이블 렌더링.

메뉴 흐름:
    메인 메뉴 → IP Address Tracing → ALB 선택 → IP 이력 테이블
                → LCU Cost Analyzer (준비 중)
                → 종료
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import questionary
from rich.markup import escape
from rich.table import Table

from cli.ui.console import console, print_error, print_info, print_warning
from core.exceptions import ElbCliError, UserCancelError, format_error_for_user

if TYPE_CHECKING:
    from cli.flow.context import ExecutionContext
    from plugins.elb.common import LoadBalancer
    from plugins.elb.ip_history_analysis import IPHistoryResult

logger = logging.getLogger(__name__)

MENU_IP_TRACE = "ip_trace"
MENU_LCU = "lcu"
MENU_EXIT = "exit"


def show_main_menu() -> str:
    """메인 메뉴 표시 후 선택값 반환 (취소 시 MENU_EXIT)"""
    choice = questionary.select(
        "메뉴를 선택하세요:",
        choices=[
            questionary.Choice("IP Address Tracing", value=MENU_IP_TRACE),
            questionary.Choice("LCU Cost Analyzer", value=MENU_LCU),
            questionary.Choice("종료", value=MENU_EXIT),
        ],
    ).ask()

    return choice or MENU_EXIT


def select_load_balancer(load_balancers: list[LoadBalancer]) -> LoadBalancer:
    """ALB 선택

    Raises:
        UserCancelError: 선택 취소 (Ctrl+C / ESC)
    """
    choices = [
        questionary.Choice(
            f"{lb.name} ({lb.scheme})" if lb.scheme else lb.name,
            value=lb,
        )
        for lb in load_balancers
    ]

    selected = questionary.select("ALB를 선택하세요:", choices=choices).ask()
    if selected is None:
        raise UserCancelError("select_load_balancer")
    return selected


def render_load_balancers(load_balancers: list[LoadBalancer]) -> None:
    """Load Balancer 목록 테이블 출력"""
    table = Table(title="Load Balancers", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name")
    table.add_column("Type", justify="center")
    table.add_column("Scheme", justify="center")
    table.add_column("State", justify="center")

    for i, lb in enumerate(load_balancers, start=1):
        table.add_row(str(i), escape(lb.name), lb.kind.display_name, lb.scheme or "-", lb.state or "-")

    console.print(table)


def render_history(result: IPHistoryResult, sort: bool = False) -> None:
    """IP 이력 테이블 출력

    Args:
        result: 조회 결과
        sort: True면 시간 오름차순 정렬 (기본: CloudTrail 응답 순서)
    """
    entries = sorted(result.entries, key=lambda e: e.event_time) if sort else result.entries

    if not entries:
        print_warning(f"{result.load_balancer}: 매칭되는 ENI 생성 이벤트가 없습니다.")
        console.print("[dim]CloudTrail 보존 기간(90일) 이전에 생성된 ALB이거나 ALB가 아닌 경우입니다.[/dim]")
        return

    table = Table(
        title=f"IP Address History - {escape(result.load_balancer)} ({result.region})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event Time (UTC)")
    table.add_column("Private IP", style="cyan")

    for i, entry in enumerate(entries, start=1):
        table.add_row(str(i), entry.event_time.isoformat(), entry.private_ip_address or "-")

    console.print(table)
    console.print(
        f"[dim]조회 이벤트 {result.scanned}건 / 매칭 {len(entries)}건 / 고유 IP {len(result.unique_ips)}개[/dim]"
    )
    if result.truncated:
        print_warning("조회 한도를 넘는 이벤트가 있어 이력이 일부 누락되었을 수 있습니다.")


def run_interactive(ctx: ExecutionContext) -> None:
    """대화형 메인 메뉴 루프

    실패는 한 줄 메시지로 표시하고 메인 메뉴로 돌아갑니다.
    """
    from plugins.elb import ip_history

    while True:
        choice = show_main_menu()

        if choice == MENU_EXIT:
            console.print("[dim]:)[/dim]")
            return

        if choice == MENU_LCU:
            print_info("LCU Cost Analyzer는 준비 중입니다.")
            continue

        try:
            ip_history.run(ctx)
        except UserCancelError:
            console.print("[dim]취소되었습니다.[/dim]")
        except ElbCliError as e:
            logger.debug("IP 이력 조회 실패", exc_info=True)
            print_error(format_error_for_user(e))
