"""Rules that pass every private or every group call on one slot unchanged."""

import logging
from enum import Enum, auto

from dmrgw.packet import DMRFrame, Flco

_log = logging.getLogger(__name__)


class ProcessResult(Enum):
    """Outcome of offering a burst to a rule."""

    UNMATCHED = auto()
    MATCHED = auto()
    IGNORED = auto()


def _check_slot(slot: int) -> int:
    if slot not in (1, 2):
        raise ValueError(f"slot must be 1 or 2, got {slot}")
    return slot


class PassAllPC:
    """Matches every private call on one slot."""

    def __init__(self, name: str, slot: int) -> None:
        self.name = name
        self.slot = _check_slot(slot)

    def process(self, frame: DMRFrame, trace: bool = False) -> ProcessResult:
        """Return MATCHED for a private call on this rule's slot."""
        matched = frame.flco is Flco.USER_USER and frame.slot_no == self.slot
        if trace:
            _log.debug(
                "Rule Trace,\tPassAllPC %s Slot=%u: %s",
                self.name, self.slot, "matched" if matched else "not matched",
            )
        return ProcessResult.MATCHED if matched else ProcessResult.UNMATCHED


class PassAllTG:
    """Matches every group call on one slot."""

    def __init__(self, name: str, slot: int) -> None:
        self.name = name
        self.slot = _check_slot(slot)

    def process(self, frame: DMRFrame, trace: bool = False) -> ProcessResult:
        """Return MATCHED for a group call on this rule's slot."""
        matched = frame.flco is Flco.GROUP and frame.slot_no == self.slot
        if trace:
            _log.debug(
                "Rule Trace,\tPassAllTG %s Slot=%u: %s",
                self.name, self.slot, "matched" if matched else "not matched",
            )
        return ProcessResult.MATCHED if matched else ProcessResult.UNMATCHED