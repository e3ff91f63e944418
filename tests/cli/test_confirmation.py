"""Tests for the clear-history confirmation gate."""

import pytest

from walletgen.cli.utils.confirmation import ClearConfirmation, ClearState, ConfirmationError


class TestClearConfirmation:
    def test_starts_idle(self):
        assert ClearConfirmation().state is ClearState.IDLE

    def test_two_acceptances_clear(self):
        gate = ClearConfirmation()
        gate.start()
        assert gate.state is ClearState.PENDING_FIRST
        assert gate.answer(True) is ClearState.PENDING_SECOND
        assert gate.answer(True) is ClearState.CLEARED
        assert gate.confirmed

    def test_decline_first_returns_idle(self):
        gate = ClearConfirmation()
        gate.start()
        assert gate.answer(False) is ClearState.IDLE
        assert not gate.confirmed

    def test_decline_second_returns_idle(self):
        gate = ClearConfirmation()
        gate.start()
        gate.answer(True)
        assert gate.answer(False) is ClearState.IDLE
        assert not gate.confirmed

    def test_answer_without_prompt_raises(self):
        with pytest.raises(ConfirmationError, match="No confirmation pending"):
            ClearConfirmation().answer(True)

    def test_start_while_pending_raises(self):
        gate = ClearConfirmation()
        gate.start()
        with pytest.raises(ConfirmationError):
            gate.start()

    def test_restart_after_decline(self):
        gate = ClearConfirmation()
        gate.start()
        gate.answer(False)
        gate.start()
        assert gate.pending
