"""Error types and the last-error slot for flight plan operations."""

import threading
import weakref


class FlightPlanError(Exception):
    """Base class for all flight plan errors."""
    pass


class StructuralParseError(FlightPlanError):
    """The document is not a usable Garmin FPL file."""
    pass


class FlightPlanIOError(FlightPlanError):
    """A flight plan file could not be read or written."""

    def __init__(self, path, message="I/O error"):
        self.path = str(path)
        super().__init__(f"{message}: {self.path}")


class SerializationError(FlightPlanError):
    """The in-memory plan cannot be written in the target format."""
    pass


class RoutePointIndexError(FlightPlanError, IndexError):
    """Route point index outside [0, count)."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Route point index {index} out of range (count: {count})")


class ReleasedError(FlightPlanError):
    """A flight plan or iterator was used after release."""
    pass


class _ErrorSlot:
    """Holds one thread's most recent failure."""

    def __init__(self):
        self.error: FlightPlanError | None = None


# Per-thread so concurrent callers never see each other's failures. Every
# live slot is also tracked so cleanup() can empty all of them; a slot goes
# away with its thread.
_state = threading.local()
_slots: "weakref.WeakSet[_ErrorSlot]" = weakref.WeakSet()
_slots_lock = threading.Lock()


def _slot() -> _ErrorSlot:
    slot = getattr(_state, "slot", None)
    if slot is None:
        slot = _ErrorSlot()
        _state.slot = slot
        with _slots_lock:
            _slots.add(slot)
    return slot


def set_last_error(error: FlightPlanError) -> None:
    """Record the most recent failure on this thread, replacing any previous one."""
    _slot().error = error


def last_error() -> FlightPlanError | None:
    """Return the most recent failure on this thread, if any."""
    slot = getattr(_state, "slot", None)
    return slot.error if slot is not None else None


def last_error_message() -> str | None:
    """Return the most recent failure's message, or None when there is none."""
    error = last_error()
    if error is None:
        return None
    return str(error)


def cleanup() -> None:
    """Clear the last-error slot of every thread. Safe to call any number of times."""
    with _slots_lock:
        for slot in _slots:
            slot.error = None
