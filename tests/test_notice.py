"""
Tests for the transient "submitted" notice
"""

import asyncio

import pytest

from signup_form.enums import NoticeState
from signup_form.notice import TransientNotice

DELAY = 0.05


class TestTransientNotice:
    """Tests for TransientNotice"""

    def test_starts_idle(self):
        notice = TransientNotice(delay=DELAY)
        assert notice.state is NoticeState.idle
        assert not notice.visible
        assert not notice.pending

    def test_show_requires_running_loop(self):
        """Should refuse to schedule a dismissal outside an event loop"""
        notice = TransientNotice(delay=DELAY)
        with pytest.raises(RuntimeError):
            notice.show()
        assert notice.state is NoticeState.idle

    @pytest.mark.asyncio
    async def test_dismisses_after_delay(self):
        notice = TransientNotice(delay=DELAY)
        notice.show()
        assert notice.visible
        await asyncio.sleep(DELAY * 3)
        assert notice.state is NoticeState.idle
        assert not notice.pending

    @pytest.mark.asyncio
    async def test_reshow_restarts_timer(self):
        """Should cancel the pending dismissal instead of stacking a second one"""
        notice = TransientNotice(delay=DELAY * 4)
        notice.show()
        await asyncio.sleep(DELAY * 2)
        notice.show()
        assert notice.pending
        await asyncio.sleep(DELAY * 3)
        # The original deadline has passed but the restarted one has not.
        assert notice.visible
        await asyncio.sleep(DELAY * 3)
        assert not notice.visible

    @pytest.mark.asyncio
    async def test_cancel_stops_pending_dismissal(self):
        notice = TransientNotice(delay=DELAY)
        notice.show()
        notice.cancel()
        assert notice.state is NoticeState.idle
        assert not notice.pending
        notice.delay = DELAY * 6
        notice.show()
        await asyncio.sleep(DELAY * 3)
        # The cancelled dismissal must not hide the later notice.
        assert notice.visible
        notice.cancel()

    def test_default_delay_from_settings(self, monkeypatch):
        from signup_form import config

        monkeypatch.setattr(config, "_settings", config.Settings(notice_dismiss_seconds=1.5))
        assert TransientNotice().delay == 1.5
