"""CLI utility functions"""

from .output import (
    console,
    format_groups,
    format_diagnostics,
    format_manifest_table,
    format_yaml,
    print_error,
    print_warning,
    print_success,
)

__all__ = [
    'console',
    'format_groups',
    'format_diagnostics',
    'format_manifest_table',
    'format_yaml',
    'print_error',
    'print_warning',
    'print_success',
]
