# cli/ui - 콘솔 컴포넌트 (rich)
"""
콘솔 출력 모듈

stderr 콘솔, 로깅 설정, stdout JSON 출력
"""

from .console import SYMBOL_ERROR, console, emit_json, get_console, print_error, setup_logging

__all__ = [
    "SYMBOL_ERROR",
    "console",
    "emit_json",
    "get_console",
    "print_error",
    "setup_logging",
]
