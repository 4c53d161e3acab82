# ABOUTME: Error types shared by the weather gateway and coordinate converter
# ABOUTME: Fetch failures stay inside the gateway, config errors are fatal

from typing import Optional


class FetchError(Exception):
    """Weather provider call failed (network error or non-2xx status)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ValueError):
    """Coordinate display string doesn't match DD°MM.MMM′H"""


class ConfigError(Exception):
    """Required configuration (e.g. the provider API key) is missing"""
