import time
from contextlib import contextmanager
from enum import Enum
from coinswap.utils.log import audit_event

class EngineState(str, Enum):
    IDLE = "Idle"
    LOADING = "LoadingCatalog"
    VALIDATING = "ValidatingInput"
    FETCHING = "FetchingPrices"
    COMPUTING = "Computing"

class Engine:
    """Tracks what the session is doing right now, for the status light."""

    def __init__(self):
        self.state = EngineState.IDLE
        self.last_action = ""
        self.last_ms = 0
        self.last_ok = True
        self._rejected: str | None = None

    def enter(self, state: EngineState):
        self.state = state

    def reject(self, reason: str):
        """Mark the running action as finished without a result."""
        self._rejected = reason

    @contextmanager
    def action(self, title: str, audit_name: str, **audit_meta):
        self.last_action = title
        self._rejected = None
        t0 = time.perf_counter()
        try:
            yield self
        except Exception as e:
            self.last_ok = False
            audit_event(audit_name, ok=False, error=str(e), **audit_meta)
            raise
        else:
            self.last_ms = int((time.perf_counter() - t0) * 1000)
            self.last_ok = self._rejected is None
            if self._rejected is None:
                audit_event(audit_name, ok=True, ms=self.last_ms, **audit_meta)
            else:
                audit_event(audit_name, ok=False, ms=self.last_ms, rejected=self._rejected, **audit_meta)
        finally:
            # every path ends back at Idle
            self.state = EngineState.IDLE

    def snapshot(self) -> dict:
        return {"state": self.state.value, "last_action": self.last_action,
                "last_ms": self.last_ms, "last_ok": self.last_ok}
