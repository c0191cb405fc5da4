"""Route registration records with attached exception filters.

A ``RouteSpec`` carries everything needed to add one endpoint to a router:
the HTTP method, the path, the endpoint itself and the filters that may
intercept its exceptions. ``get_with_filter`` bundles "GET handler" and
"these filters" into one decorator; ``register_routes`` applies the records
to an ``APIRouter`` at startup.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from fastapi import APIRouter, Request


class ExceptionFilter:
    """Intercepts exceptions raised by the endpoints it is attached to.

    Subclasses set ``catches`` and implement ``catch``. Whatever ``catch``
    returns is used as the endpoint's result.
    """

    catches: tuple[type[BaseException], ...] = (Exception,)

    def matches(self, exc: BaseException) -> bool:
        return isinstance(exc, self.catches)

    def catch(self, exc: BaseException, request: Request) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class RouteSpec:
    method: str
    path: str
    endpoint: Callable[..., Any]
    filters: tuple[ExceptionFilter, ...] = ()
    options: dict[str, Any] = field(default_factory=dict)


def route(method: str, path: str, *filters: ExceptionFilter, **options: Any) -> Callable[[Callable[..., Any]], RouteSpec]:
    """Decorator turning an endpoint into a ``RouteSpec``.

    ``options`` are passed through to ``APIRouter.add_api_route``.
    """

    def decorator(endpoint: Callable[..., Any]) -> RouteSpec:
        return RouteSpec(method.upper(), path, endpoint, tuple(filters), dict(options))

    return decorator


def get_with_filter(path: str, *filters: ExceptionFilter, **options: Any) -> Callable[[Callable[..., Any]], RouteSpec]:
    """GET route with exception filters in a single declaration."""
    return route("GET", path, *filters, **options)


def register_routes(router: APIRouter, specs: Iterable[RouteSpec]) -> APIRouter:
    for spec in specs:
        router.add_api_route(
            spec.path,
            _apply_filters(spec),
            methods=[spec.method],
            **spec.options,
        )
    return router


def _apply_filters(spec: RouteSpec) -> Callable[..., Any]:
    endpoint = spec.endpoint
    if not spec.filters:
        return endpoint

    async def wrapper(*args: Any, _filter_request: Request, **kwargs: Any) -> Any:
        try:
            result = endpoint(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as exc:
            for exception_filter in spec.filters:
                if exception_filter.matches(exc):
                    return exception_filter.catch(exc, _filter_request)
            raise

    # No __wrapped__: FastAPI must read the signature below, which adds the
    # request for the filters whether or not the endpoint asks for it.
    for attr in ("__module__", "__name__", "__qualname__", "__doc__"):
        setattr(wrapper, attr, getattr(endpoint, attr))
    signature = inspect.signature(endpoint, eval_str=True)
    params = [p for p in signature.parameters.values() if p.kind != inspect.Parameter.VAR_KEYWORD]
    params.append(
        inspect.Parameter("_filter_request", inspect.Parameter.KEYWORD_ONLY, annotation=Request)
    )
    wrapper.__signature__ = signature.replace(parameters=params)
    return wrapper
