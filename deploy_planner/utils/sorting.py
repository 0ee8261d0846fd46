"""Deterministic ordering helpers"""

from typing import Tuple


def ordinal_key(value: str) -> Tuple[str, str]:
    """Sort key: case-insensitive first, raw code points as tie-breaker

    Gives the same order on every platform and locale, e.g.
    ``Alpha, beta, Zeta``.
    """
    value = value or ""
    return value.lower(), value


def component_key(component) -> Tuple[Tuple[str, str], Tuple[str, str], str]:
    """Sort key for components: type name, then component name, then id"""
    return ordinal_key(component.type), ordinal_key(component.name), component.id
