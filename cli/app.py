"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    elbcli                          # 대화형 메인 메뉴
    elbcli --version                # 버전 표시
    elbcli list                     # Load Balancer 목록
    elbcli history <ALB 이름>       # ALB Private IP 이력

    예시:
    elbcli -p dev -r ap-northeast-2 history my-alb
    elbcli history my-alb --start 2024-01-01 --sort -f csv -o history.csv

종료 코드:
    0   성공 (매칭 이력이 없는 경우 포함)
    1   설정 로드/API 호출/파싱 실패
    130 사용자 취소
"""

import logging
import os
import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가 (plugins 모듈 임포트를 위함)
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import click  # noqa: E402
from click import Context  # noqa: E402
from rich.logging import RichHandler  # noqa: E402

from cli.flow.context import ExecutionContext  # noqa: E402
from cli.ui.console import console, err_console, print_error, print_success, print_warning  # noqa: E402
from core.config import LogConfig, get_version, settings  # noqa: E402
from core.exceptions import ElbCliError, format_error_for_user  # noqa: E402

logger = logging.getLogger(__name__)

VERSION = get_version()

EXIT_ERROR = 1
EXIT_CANCELLED = 130

DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _configure_logging(verbose: bool) -> None:
    """로깅 설정

    기본은 WARNING 레벨로 INFO 로그가 도구 출력에 섞이지 않도록 함.
    로그는 표준에러로 출력 (-f json/csv 표준출력과 분리).
    LOG_LEVEL 환경변수 또는 --verbose(DEBUG)로 변경.
    """
    log_config = LogConfig.from_env()
    if verbose:
        level = logging.DEBUG
    elif "LOG_LEVEL" in os.environ:
        level = logging.getLevelName(log_config.level)
        if not isinstance(level, int):
            level = logging.WARNING
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=log_config.format if "LOG_FORMAT" in os.environ else "%(message)s",
        datefmt=log_config.date_format,
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _as_utc(value: datetime | None) -> datetime | None:
    """입력 시각을 UTC로 간주"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _fail(error: Exception) -> None:
    """오류 메시지 출력 후 종료"""
    logger.debug("명령 실패", exc_info=True)
    print_error(format_error_for_user(error))
    raise SystemExit(EXIT_ERROR)


@click.group(invoke_without_command=True)
@click.version_option(VERSION, prog_name="elbcli")
@click.option("-p", "--profile", "profile", default=None, help="AWS 프로파일 (기본: AWS_PROFILE)")
@click.option("-r", "--region", "region", default=None, help="리전 (기본: AWS_REGION 또는 ap-northeast-2)")
@click.option("-v", "--verbose", is_flag=True, help="디버그 로그 출력")
@click.pass_context
def cli(ctx: Context, profile: str | None, region: str | None, verbose: bool) -> None:
    """elbcli - ELB 운영 도구

    CloudTrail 감사 로그로 ALB의 과거 Private IP 할당 이력을 조회합니다.
    """
    _configure_logging(verbose)

    exec_ctx = ExecutionContext()
    if profile:
        exec_ctx.profile_name = profile
    if region:
        exec_ctx.region = region
    ctx.obj = exec_ctx

    if ctx.invoked_subcommand is None:
        from cli.ui.menu import run_interactive

        # 자격 증명은 메뉴 표시 전에 확인 (실패 시 시작 중단)
        try:
            exec_ctx.get_session()
        except ElbCliError as e:
            _fail(e)

        try:
            run_interactive(exec_ctx)
        except KeyboardInterrupt:
            console.print("[dim]취소되었습니다.[/dim]")
            raise SystemExit(EXIT_CANCELLED) from None


@cli.command("list")
@click.option(
    "-t",
    "--type",
    "lb_type",
    type=click.Choice(["application", "network", "gateway", "all"]),
    default="application",
    show_default=True,
    help="Load Balancer 타입",
)
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
@click.pass_obj
def list_command(exec_ctx: ExecutionContext, lb_type: str, as_json: bool) -> None:
    """Load Balancer 목록

    \b
    Examples:
        elbcli list               # ALB 목록
        elbcli list -t all        # 전체 Load Balancer
        elbcli list --json
    """
    import json as json_module

    from cli.ui.menu import render_load_balancers
    from plugins.elb.common import LBType, list_load_balancers

    kind = None if lb_type == "all" else LBType.from_string(lb_type)

    try:
        session = exec_ctx.get_session()
        load_balancers = list_load_balancers(session, exec_ctx.region, kind=kind)
    except ElbCliError as e:
        _fail(e)

    if as_json:
        output_data = [
            {
                "name": lb.name,
                "type": lb.kind.value,
                "scheme": lb.scheme,
                "state": lb.state,
                "vpc_id": lb.vpc_id,
            }
            for lb in load_balancers
        ]
        click.echo(json_module.dumps(output_data, ensure_ascii=False, indent=2))
        return

    if not load_balancers:
        print_warning(f"{exec_ctx.region} 리전에 Load Balancer가 없습니다.")
        return

    render_load_balancers(load_balancers)


@cli.command("history")
@click.argument("name")
@click.option("--start", "start_time", type=click.DateTime(DATETIME_FORMATS), default=None, help="조회 시작 (UTC)")
@click.option("--end", "end_time", type=click.DateTime(DATETIME_FORMATS), default=None, help="조회 종료 (UTC)")
@click.option(
    "--max-results",
    type=click.IntRange(1, 50),
    default=None,
    help=f"CloudTrail 조회 건수 (기본: {settings.LOOKUP_MAX_RESULTS})",
)
@click.option("--sort", is_flag=True, help="시간 오름차순 정렬 (기본: CloudTrail 응답 순서)")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["console", "json", "csv", "excel"]),
    default="console",
    show_default=True,
)
@click.option("-o", "--output", "output_path", default=None, help="출력 파일(json/csv) 또는 디렉토리(excel)")
@click.pass_obj
def history_command(
    exec_ctx: ExecutionContext,
    name: str,
    start_time: datetime | None,
    end_time: datetime | None,
    max_results: int | None,
    sort: bool,
    output_format: str,
    output_path: str | None,
) -> None:
    """ALB Private IP 할당 이력

    \b
    Examples:
        elbcli history my-alb
        elbcli history my-alb --start 2024-01-01 --end 2024-01-08
        elbcli history my-alb -f excel
    """
    from cli.ui.menu import render_history
    from plugins.elb.ip_history import collect_ip_history, export_result

    if not name.strip():
        raise click.BadParameter("ALB 이름이 비어 있습니다", param_hint="NAME")

    exec_ctx.start_time = _as_utc(start_time)
    exec_ctx.end_time = _as_utc(end_time)
    if max_results is not None:
        exec_ctx.max_results = max_results
    exec_ctx.sort = sort
    exec_ctx.output_format = output_format
    exec_ctx.output_path = output_path

    try:
        session = exec_ctx.get_session()
        result = collect_ip_history(
            session,
            exec_ctx.region,
            name,
            max_results=exec_ctx.max_results,
            start_time=exec_ctx.start_time,
            end_time=exec_ctx.end_time,
        )
    except ElbCliError as e:
        _fail(e)

    if output_format == "console":
        render_history(result, sort=sort)
        return

    if sort:
        # 정렬은 출력용 사본에만 적용
        result = replace(result, entries=sorted(result.entries, key=lambda e: e.event_time))

    try:
        filepath = export_result(result, output_format, output_path, exec_ctx.identifier)
    except OSError as e:
        _fail(ElbCliError("보고서 저장 실패", cause=e))

    if filepath:
        print_success(f"저장 완료: {filepath}")


def main() -> None:
    """console_script 엔트리포인트"""
    cli()


if __name__ == "__main__":
    main()
