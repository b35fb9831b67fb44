from __future__ import annotations
from enum import Enum


class StatusCode(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class KeysetError(Exception):
    code: StatusCode = StatusCode.INVALID_ARGUMENT

    def __init__(self, message: str, code: StatusCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(KeysetError):
    code = StatusCode.INVALID_ARGUMENT


_ERROR_TYPES = {
    StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
}


def to_error_f(code: StatusCode, fmt: str, *args) -> KeysetError:
    """
    Build (not raise) the error for `code` with a %-formatted message.

        raise to_error_f(StatusCode.INVALID_ARGUMENT, "key %d has unknown prefix", key_id)
    """
    message = fmt % args if args else fmt
    return _ERROR_TYPES.get(code, KeysetError)(message, code)
