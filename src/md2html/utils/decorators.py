#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/decorators.py
"""Optional-backend guard and DEBUG-level stage timing."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, Mapping

from md2html.exceptions import DependencyError
from md2html.utils.packages import check_requirements


def requires_dependencies(feature_name: str, requirements: Mapping[str, str]) -> Callable:
    """Raise DependencyError before the call if an optional backend is unusable.

    Parameters
    ----------
    feature_name : str
        Feature named in the error message (e.g. "highlight")
    requirements : mapping of str to str
        Backend name to version specifier, e.g. ``{"pygments": ">=2.15"}``

    Examples
    --------
        >>> class PygmentsHighlighter:
        ...     @requires_dependencies("highlight", {"pygments": ">=2.15"})
        ...     def __init__(self):
        ...         import pygments

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            report = check_requirements(requirements)
            if not report.satisfied:
                raise DependencyError(
                    feature_name=feature_name,
                    missing_packages=report.missing,
                    version_mismatches=report.mismatched,
                    original_import_error=report.import_error,
                ) from report.import_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log the wall time of the enclosed block at DEBUG, if DEBUG is enabled."""
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    start = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {(time.perf_counter() - start) * 1000:.2f}ms")
