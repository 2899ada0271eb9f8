# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (대화형 선택, 콘솔 출력 등)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    err_console,
    get_console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from .menu import (
    render_history,
    render_load_balancers,
    run_interactive,
    select_load_balancer,
    show_main_menu,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "console",
    "err_console",
    "get_console",
    "print_error",
    "print_header",
    "print_info",
    "print_success",
    "print_warning",
    "render_history",
    "render_load_balancers",
    "run_interactive",
    "select_load_balancer",
    "show_main_menu",
]
