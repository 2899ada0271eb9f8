"""
plugins/elb/ip_history.py - ALB Private IP 이력 조회

CloudTrail CreateNetworkInterface 이벤트에서 ALB ENI의 Private IP
할당 이력을 재구성합니다. 현재 설정만 제공하는 AWS API로는 알 수 없는
"지난주 이 ALB가 어떤 IP를 쓰고 있었나"를 확인할 때 사용합니다.

제약:
    - CloudTrail 이벤트 보존 기간(90일) 이내의 이력만 조회됩니다
    - LookupEvents 한 페이지(최대 50건)만 조회합니다
    - ENI 삭제 이벤트는 반영하지 않으며 중복 IP를 제거하지 않습니다

플러그인 규약:
    - run(ctx): 필수. 실행 함수.
"""

from __future__ import annotations

import logging

from rich.console import Console

from core.aws import get_client
from core.exceptions import ElbCliError
from core.output import OutputPath

from .common import LBType, list_load_balancers
from .ip_history_analysis import (
    CREATE_NETWORK_INTERFACE,
    CloudTrailEventSource,
    HistoryCorrelator,
    IPHistoryResult,
    NameMatcher,
)
from .ip_history_analysis.reporter import render_csv, render_json, write_csv, write_excel, write_json

console = Console()
logger = logging.getLogger(__name__)

# 필요한 AWS 권한 목록
REQUIRED_PERMISSIONS = {
    "read": [
        "elasticloadbalancing:DescribeLoadBalancers",
        "cloudtrail:LookupEvents",
    ],
}

OUTPUT_FORMATS = ("console", "json", "csv", "excel")


def collect_ip_history(
    session,
    region: str | None,
    load_balancer_name: str,
    max_results: int = 50,
    start_time=None,
    end_time=None,
    max_attempts: int | None = None,
) -> IPHistoryResult:
    """단일 리전에서 ALB IP 이력 조회

    Args:
        session: boto3 session
        region: 리전 (None이면 세션 기본값)
        load_balancer_name: ALB 이름
        max_results: LookupEvents 조회 건수 (1~50)
        start_time: 조회 시작 시각 (None이면 CloudTrail 기본값)
        end_time: 조회 종료 시각
        max_attempts: API 최대 시도 횟수 (None이면 settings 값)

    Returns:
        IPHistoryResult

    Raises:
        AuditSourceUnavailableError: CloudTrail 조회 실패
        PayloadDecodeError: 이벤트 페이로드 파싱 실패
        ValueError: ALB 이름이 비어 있는 경우
    """
    cloudtrail = get_client(session, "cloudtrail", region_name=region, max_attempts=max_attempts)
    source = CloudTrailEventSource(
        cloudtrail,
        max_results=max_results,
        start_time=start_time,
        end_time=end_time,
    )

    # 이름 검증을 조회보다 먼저 수행
    matcher = NameMatcher(load_balancer_name)
    page = source.fetch(CREATE_NETWORK_INTERFACE)
    entries = HistoryCorrelator(source).correlate(page.events, matcher)

    return IPHistoryResult(
        load_balancer=load_balancer_name,
        region=region or getattr(session, "region_name", "") or "",
        entries=entries,
        scanned=page.scanned,
        truncated=page.truncated,
    )


def export_result(result: IPHistoryResult, output_format: str, output_path: str | None, identifier: str) -> str | None:
    """출력 형식별 결과 내보내기

    Args:
        result: 조회 결과
        output_format: json, csv, excel (console은 아무 것도 하지 않음)
        output_path: 파일 경로 (json/csv) 또는 디렉토리 (excel). None이면
            json/csv는 표준출력, excel은 기본 출력 디렉토리
        identifier: 기본 출력 디렉토리 식별자 (프로파일명)

    Returns:
        저장된 파일 경로 (표준출력/console이면 None)
    """
    if output_format == "json":
        if output_path:
            return write_json(result, output_path)
        console.out(render_json(result), highlight=False)
        return None

    if output_format == "csv":
        if output_path:
            return write_csv(result, output_path)
        console.out(render_csv(result), highlight=False, end="")
        return None

    if output_format == "excel":
        output_dir = output_path or OutputPath(identifier).sub("elb", "ip_history").with_date().build()
        return write_excel(result, output_dir)

    return None


def run(ctx) -> None:
    """ALB IP 이력 조회 (대화형)

    Raises:
        ElbCliError: 설정 로드/목록 조회/이력 조회 실패
        UserCancelError: ALB 선택 취소
    """
    from cli.ui.console import print_header
    from cli.ui.menu import render_history, select_load_balancer

    print_header("IP Address Tracing")
    session = ctx.get_session()

    console.print("[cyan]Application Load Balancer 목록을 조회하는 중...[/cyan]")
    albs = list_load_balancers(session, ctx.region, kind=LBType.APPLICATION)
    if not albs:
        console.print(f"[yellow]! {ctx.region} 리전에 ALB가 없습니다.[/yellow]")
        return

    console.print(f"[green]✓ {len(albs)}개의 ALB를 발견했습니다.[/green]")
    alb = select_load_balancer(albs)

    console.print(f"[cyan]{alb.name} IP 이력을 조회하는 중...[/cyan]")
    result = collect_ip_history(
        session,
        ctx.region,
        alb.name,
        max_results=ctx.max_results,
        start_time=ctx.start_time,
        end_time=ctx.end_time,
    )

    render_history(result, sort=ctx.sort)

    if ctx.output_format in ("json", "csv", "excel"):
        try:
            filepath = export_result(result, ctx.output_format, ctx.output_path, ctx.identifier)
        except OSError as e:
            raise ElbCliError("보고서 저장 실패", cause=e) from e
        if filepath:
            console.print(f"\n[bold green]완료![/bold green] {filepath}")
