import logging
from dataclasses import replace

import pytest

from dmrgw.packet import DMRFrame, Flco
from dmrgw.rules import PassAllPC, PassAllTG, ProcessResult


@pytest.mark.parametrize(
    "flco, slot, expected",
    [
        (Flco.USER_USER, 1, ProcessResult.MATCHED),
        (Flco.USER_USER, 2, ProcessResult.UNMATCHED),
        (Flco.GROUP, 1, ProcessResult.UNMATCHED),
        (Flco.GROUP, 2, ProcessResult.UNMATCHED),
    ],
)
def test_pass_all_pc(flco, slot, expected):
    rule = PassAllPC("Net1", 1)
    assert rule.process(DMRFrame(slot_no=slot, flco=flco, dst_id=1234), False) is expected


@pytest.mark.parametrize(
    "flco, slot, expected",
    [
        (Flco.GROUP, 2, ProcessResult.MATCHED),
        (Flco.GROUP, 1, ProcessResult.UNMATCHED),
        (Flco.USER_USER, 2, ProcessResult.UNMATCHED),
        (Flco.USER_USER, 1, ProcessResult.UNMATCHED),
    ],
)
def test_pass_all_tg(flco, slot, expected):
    rule = PassAllTG("Net1", 2)
    assert rule.process(DMRFrame(slot_no=slot, flco=flco, dst_id=91), False) is expected


@pytest.mark.parametrize("cls", [PassAllPC, PassAllTG])
@pytest.mark.parametrize("slot", [0, 3])
def test_invalid_slot_rejected(cls, slot):
    with pytest.raises(ValueError):
        cls("Net1", slot)


@pytest.mark.parametrize("cls, flco", [(PassAllPC, Flco.USER_USER), (PassAllTG, Flco.GROUP)])
def test_frame_left_unchanged(cls, flco):
    frame = DMRFrame(slot_no=1, flco=flco, src_id=5, dst_id=6, data=bytes(range(33)))
    original = replace(frame)
    assert cls("Net1", 1).process(frame, False) is ProcessResult.MATCHED
    assert frame == original


def test_trace_logs_outcome(caplog):
    rule = PassAllTG("Net1", 1)
    with caplog.at_level(logging.DEBUG, logger="dmrgw.rules"):
        assert rule.process(DMRFrame(slot_no=1, flco=Flco.GROUP), True) is ProcessResult.MATCHED
        assert rule.process(DMRFrame(slot_no=2, flco=Flco.GROUP), True) is ProcessResult.UNMATCHED
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert messages[0].endswith(": matched")
    assert messages[1].endswith(": not matched")
    assert "PassAllTG Net1 Slot=1" in messages[0]


def test_no_trace_no_log(caplog):
    rule = PassAllPC("Net1", 2)
    with caplog.at_level(logging.DEBUG, logger="dmrgw.rules"):
        assert rule.process(DMRFrame(slot_no=2, flco=Flco.USER_USER), False) is ProcessResult.MATCHED
    assert caplog.records == []