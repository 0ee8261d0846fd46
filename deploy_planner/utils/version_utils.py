"""Version management utilities"""

from typing import Optional

from packaging.version import parse, Version, InvalidVersion

from ..constants import API_VERSION_PATTERN


def parse_version(version_str: str) -> Optional[Version]:
    """
    Parse version string

    Args:
        version_str: Version string

    Returns:
        Version object or None if invalid
    """
    try:
        return parse(str(version_str))
    except InvalidVersion:
        return None


def is_valid_api_version(version_str: str) -> bool:
    """
    Check if a string is a MAJOR.MINOR metadata API version

    Args:
        version_str: Version string (e.g. "59.0")

    Returns:
        True if valid
    """
    if not version_str or not API_VERSION_PATTERN.match(str(version_str)):
        return False
    return parse_version(version_str) is not None

