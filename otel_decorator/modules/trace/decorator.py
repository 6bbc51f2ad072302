"""The @trace decorator.

Wraps a function in an OpenTelemetry span and sets span attributes from
the function's arguments, locals it chooses to record, and its result.

Python cannot list a function's locals after it returns, so the bindings
available to ``include`` are:

- the call's arguments, bound to parameter names (defaults applied), and
- any values the body passes to :func:`record_locals`.

Example:
    @trace("my_app.worker.do_work", include=["arg1", "arg2.count", "total", "result"])
    def do_work(arg1, arg2):
        total = arg1["count"] + arg2["count"]
        record_locals(total=total)
        return ("ok", total)
"""

import inspect
from collections.abc import Callable, Mapping, Sequence
from contextvars import ContextVar
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import structlog
from opentelemetry.trace import Span, SpanKind, Status, StatusCode
from opentelemetry.util.types import AttributeValue

from otel_decorator.infrastructure.observability.tracing import get_tracer
from otel_decorator.modules.trace.attributes import resolve
from otel_decorator.modules.trace.exceptions import TraceConfigurationError
from otel_decorator.modules.trace.schemas import MISSING, AttributePathSpec
from otel_decorator.modules.trace.validator import validate

P = ParamSpec("P")
R = TypeVar("R")

logger = structlog.get_logger()

# Locals recorded by the traced call currently running in this context
_recorded_locals: ContextVar[dict[str, Any] | None] = ContextVar(
    "otel_decorator_recorded_locals", default=None
)


def record_locals(**values: Any) -> None:
    """Make local values available to the enclosing traced call's `include`.

    Later calls overwrite earlier values of the same name. Outside a traced
    call this does nothing.

    Args:
        **values: Local names and their current values.
    """
    recorded = _recorded_locals.get()
    if recorded is None:
        logger.debug("record_locals_outside_trace", names=sorted(values))
        return
    recorded.update(values)


def trace(
    span_name: str,
    *,
    include: Sequence[AttributePathSpec] = (),
    service: str | None = None,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: Mapping[str, AttributeValue] | None = None,
    record_exception: bool = True,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to trace a function with a named OpenTelemetry span.

    Works with both sync and async functions. The configuration is checked
    when the decorator is applied; a malformed span name or include list
    raises TraceConfigurationError naming the decorated function.

    Args:
        span_name: Name for the span.
        include: Attribute paths to set on the span when the call ends. A
            path is an argument or recorded local name, "result" for the
            return value, or a nested lookup written "arg.field" or
            ["arg", "field"].
        service: Tracer (instrumentation scope) name. Defaults to the
            decorated function's module.
        kind: The span kind.
        attributes: Static attributes set when the span starts.
        record_exception: Whether to record exceptions on the span.

    Returns:
        The decorator.

    Raises:
        TraceConfigurationError: If the span name or include list is invalid.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(fn)
        arity = len(signature.parameters)
        target = f"{fn.__module__}.{fn.__qualname__}/{arity} @trace"

        try:
            paths = validate(span_name, include)
        except TraceConfigurationError as e:
            raise e.with_target(target) from e

        tracer = get_tracer(service or fn.__module__)
        static_attributes = dict(attributes) if attributes else None

        def finish(
            span: Span,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
            recorded: dict[str, Any],
            result: Any,
        ) -> None:
            if not paths or not span.is_recording():
                return
            bindings = _bind_arguments(signature, args, kwargs)
            bindings.update(recorded)
            span.set_attributes(resolve(bindings, paths, result))

        def fail(span: Span, e: BaseException) -> None:
            if record_exception:
                span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))

        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                with tracer.start_as_current_span(
                    span_name,
                    kind=kind,
                    attributes=static_attributes,
                    record_exception=False,
                    set_status_on_exception=False,
                ) as span:
                    recorded: dict[str, Any] = {}
                    token = _recorded_locals.set(recorded)
                    result: Any = MISSING
                    try:
                        result = await fn(*args, **kwargs)
                        span.set_status(Status(StatusCode.OK))
                        return result
                    except BaseException as e:
                        fail(span, e)
                        raise
                    finally:
                        _recorded_locals.reset(token)
                        finish(span, args, kwargs, recorded, result)

            return async_wrapper  # type: ignore[return-value]
        else:

            @wraps(fn)
            def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
                with tracer.start_as_current_span(
                    span_name,
                    kind=kind,
                    attributes=static_attributes,
                    record_exception=False,
                    set_status_on_exception=False,
                ) as span:
                    recorded: dict[str, Any] = {}
                    token = _recorded_locals.set(recorded)
                    result: Any = MISSING
                    try:
                        result = fn(*args, **kwargs)
                        span.set_status(Status(StatusCode.OK))
                        return result
                    except BaseException as e:
                        fail(span, e)
                        raise
                    finally:
                        _recorded_locals.reset(token)
                        finish(span, args, kwargs, recorded, result)

            return sync_wrapper

    return decorator


def _bind_arguments(
    signature: inspect.Signature,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        # The call itself was invalid and has already raised
        return {}
    bound.apply_defaults()
    return dict(bound.arguments)
