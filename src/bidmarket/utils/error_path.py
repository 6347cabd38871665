"""Get the path to the error handler module."""

import traceback

from bidmarket.common.app_error import AppError

__all__ = ["get_error_path"]


def get_error_path(err: AppError | Exception) -> str:
    """Extract formatted source location from an error's traceback.

    Args:
        err: The raised error carrying traceback information

    Returns:
        The location as ``bidmarket/<module>:<line> (fn:<function>)``, or
        ``unknown`` when the error was never raised.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"
    filename, line, func, _ = frames[-1]

    _, found, app_path = filename.rpartition("bidmarket")
    if found:
        filename = f"bidmarket{app_path}"
    return f"{filename}:{line} (fn:{func})"
