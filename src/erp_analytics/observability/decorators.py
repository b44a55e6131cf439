"""Tracing decorators for automatic observability."""

import functools
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any

from erp_analytics.observability.langfuse_client import create_span

logger = logging.getLogger(__name__)


def _start_span(trace_name: str, trace_type: str, func: Callable):
    try:
        return create_span(
            name=trace_name,
            metadata={
                "type": trace_type,
                "function": func.__name__,
                "module": func.__module__,
            },
        )
    except Exception as e:
        logger.debug(f"Error creating span: {e}")
        return None


def _end_span(span_obj, start_time: float, result: Any, error: BaseException | None) -> None:
    if span_obj is None:
        return

    try:
        span_obj.update(
            output={"result": str(result)[:1000] if result is not None else None},
            metadata={
                "duration_seconds": time.perf_counter() - start_time,
                "error": str(error) if error else None,
            },
        )
        span_obj.end()
    except Exception as e:
        logger.debug(f"Error updating/ending span: {e}")


def trace(name: str | None = None, trace_type: str = "function"):
    """
    Decorator to trace function execution with LangFuse.

    Tracing problems are logged and ignored; exceptions raised by the
    wrapped function always propagate.

    Args:
        name: Optional custom name for the trace (defaults to function name)
        trace_type: Type of trace (function, aggregation, store, export)

    Usage:
        @trace(name="analytics_report", trace_type="aggregation")
        async def get_analytics(days):
            ...
    """

    def decorator(func: Callable) -> Callable:
        trace_name = name or func.__name__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs) -> Any:
                span_obj = _start_span(trace_name, trace_type, func)
                start_time = time.perf_counter()
                result = None
                error = None
                try:
                    result = await func(*args, **kwargs)
                    return result
                except Exception as e:
                    error = e
                    raise
                finally:
                    _end_span(span_obj, start_time, result, error)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            span_obj = _start_span(trace_name, trace_type, func)
            start_time = time.perf_counter()
            result = None
            error = None
            try:
                result = func(*args, **kwargs)
                return result
            except Exception as e:
                error = e
                raise
            finally:
                _end_span(span_obj, start_time, result, error)

        return sync_wrapper

    return decorator
