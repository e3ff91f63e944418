"""Two-step confirmation gate for clearing history."""
from enum import Enum


class ClearState(Enum):
    IDLE = "idle"
    PENDING_FIRST = "pending_first"
    PENDING_SECOND = "pending_second"
    CLEARED = "cleared"


class ConfirmationError(Exception):
    """Answer given while no confirmation was pending."""


class ClearConfirmation:
    """Tracks the double confirmation required before clearing history.

    ``IDLE -> PENDING_FIRST -> PENDING_SECOND -> CLEARED``; declining either
    prompt returns to ``IDLE``.
    """

    def __init__(self) -> None:
        self._state = ClearState.IDLE

    @property
    def state(self) -> ClearState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._state in (ClearState.PENDING_FIRST, ClearState.PENDING_SECOND)

    @property
    def confirmed(self) -> bool:
        return self._state == ClearState.CLEARED

    def start(self) -> None:
        """Begin a new confirmation round."""
        if self.pending:
            raise ConfirmationError("Confirmation already in progress")
        self._state = ClearState.PENDING_FIRST

    def answer(self, accepted: bool) -> ClearState:
        """Record the answer to the pending prompt and return the new state."""
        match self._state:
            case ClearState.PENDING_FIRST:
                self._state = ClearState.PENDING_SECOND if accepted else ClearState.IDLE
            case ClearState.PENDING_SECOND:
                self._state = ClearState.CLEARED if accepted else ClearState.IDLE
            case _:
                raise ConfirmationError(f"No confirmation pending (state={self._state.value})")
        return self._state
