"""
Error kinds and exceptions raised at the estimator boundary.

The numeric codes mirror the H3 library's ``H3Error`` values so callers
bridging to the C API can map them one-to-one.  Only the kinds hexbbox
actually raises are listed.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = 0
    FAILED = 1
    RES_DOMAIN = 4


class HexBBoxError(Exception):
    """Base class for every error raised by hexbbox."""

    code: ErrorCode = ErrorCode.FAILED

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ResolutionDomainError(HexBBoxError, ValueError):
    """Resolution argument outside ``[0, MAX_RES]``."""

    code = ErrorCode.RES_DOMAIN

    def __init__(self, res: object) -> None:
        super().__init__(f"Resolution out of range: {res!r}")
        self.res = res


class EstimateFailedError(HexBBoxError):
    """The estimate could not be represented as a finite integer."""

    code = ErrorCode.FAILED


class BackendNotFoundError(HexBBoxError, LookupError):
    """No indexing back-end is registered under the requested name."""

    code = ErrorCode.FAILED
