# up_functions/dispatch.py

from __future__ import annotations

from typing import Callable, Mapping

from up_functions.contracts.protocol import OperationResult, Request
from up_functions.contracts.values import Params
from up_functions.errors import UnknownFunction
from up_functions.utils.logging import LogCtx, get_logger, with_ctx

Operation = Callable[[Params, Params], OperationResult]
OperationTable = Mapping[str, Operation]

logger = get_logger(__name__)


def dispatch(table: OperationTable, request: Request, *, provider: str | None = None) -> OperationResult:
    """
    Resolve request.function in the provider's table and run it.

    Lookup is a single exact, case-sensitive match. On a miss nothing is invoked and
    UnknownFunction names the requested string verbatim. On a hit the operation's
    result or ProviderError propagates unchanged.
    """
    log = with_ctx(logger, LogCtx(provider=provider, function=request.function))

    fn = table.get(request.function)
    if fn is None:
        log.debug("no such function; known=%s", sorted(table))
        raise UnknownFunction.named(request.function)

    log.debug("invoking %s", getattr(fn, "__name__", repr(fn)))
    return fn(request.params, request.context)
