from __future__ import annotations
import sys
from typing import Any, Callable, Dict, Optional

from rich.console import Console
from rich.markup import escape

TraceEvent = Dict[str, Any]
TraceSink = Callable[[TraceEvent], None]

class Tracer:
    """
    Hands one event per engine operation to a caller-supplied sink:

        {"op": "insert", "msg": "./person/p0926.json", "path": "./person/p0926.json"}

    The sink is an observer only; whatever it raises is dropped so it can never
    fail the operation being traced.
    """
    def __init__(self, on_trace: Optional[TraceSink] = None) -> None:
        self._sink = on_trace

    @property
    def enabled(self) -> bool:
        return self._sink is not None

    def emit(self, op: str, msg: str = "", **args: Any) -> None:
        if self._sink is None:
            return
        evt: TraceEvent = {"op": op, "msg": msg}
        evt.update(args)
        try:
            self._sink(evt)
        except Exception:
            pass

def trace_printer(console: Optional[Console] = None) -> TraceSink:
    """Sink printing each event as a single `[jsondoc] OP msg` line on stderr."""
    out = console or Console(file=sys.stderr, highlight=False)

    def printer(evt: TraceEvent) -> None:
        op = str(evt.get("op", "")).upper()
        msg = evt.get("msg", "")
        extra = {k: v for k, v in evt.items() if k not in ("op", "msg")}
        parts = [f"[bold]{op}[/bold]"]
        if msg:
            parts.append(escape(str(msg)))
        if extra:
            parts.append(escape(" ".join(f"{k}={v!r}" for k, v in extra.items())))
        out.print(escape("[jsondoc]") + " " + " ".join(parts), soft_wrap=True)

    return printer
