"""
Translation of storage exceptions into user-facing messages.
"""

import binascii
import socket
from collections.abc import Iterator

from azure.core.exceptions import AzureError

INVALID_ACCOUNT_KEY = "Invalid account key"
INVALID_ACCOUNT_NAME = "Invalid account name"


def _iter_causes(exception: BaseException) -> Iterator[BaseException]:
    """Walk the underlying errors of an exception, each one at most once."""
    seen = {id(exception)}
    pending = [exception]
    while pending:
        current = pending.pop(0)
        for cause in (
            getattr(current, "inner_exception", None),
            current.__cause__,
            current.__context__,
        ):
            if isinstance(cause, BaseException) and id(cause) not in seen:
                seen.add(id(cause))
                pending.append(cause)
                yield cause


def _find_host_error(exception: BaseException) -> socket.gaierror | None:
    for cause in _iter_causes(exception):
        if isinstance(cause, socket.gaierror):
            return cause
    return None


def get_exception_message(exception: BaseException) -> str:
    """
    Get a human-readable message for an error raised while accessing storage.

    Azure errors caused by a host-resolution failure point at a wrong
    account name; other Azure errors and malformed (non base64) keys are
    reported as an invalid account key. Anything else keeps its own message.
    """
    error = exception
    if isinstance(error, StopIteration) and error.__cause__ is not None:
        error = error.__cause__

    if isinstance(error, AzureError):
        host_error = _find_host_error(error)
        if host_error is not None:
            return f"{INVALID_ACCOUNT_NAME}: {host_error}"
        return INVALID_ACCOUNT_KEY

    if isinstance(error, binascii.Error):
        return INVALID_ACCOUNT_KEY

    return str(error) or repr(error)
