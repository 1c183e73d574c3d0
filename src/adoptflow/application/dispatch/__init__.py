"""Application dispatch – event routing and acknowledgement decisions."""
from adoptflow.application.dispatch.dispatcher import (
    DispatchResult,
    Disposition,
    EventDispatcher,
    Handler,
    Route,
)
from adoptflow.application.dispatch.table import build_dispatch_table

__all__ = [
    "DispatchResult",
    "Disposition",
    "EventDispatcher",
    "Handler",
    "Route",
    "build_dispatch_table",
]
