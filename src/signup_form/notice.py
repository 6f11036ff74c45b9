"""Auto-dismissing "submitted" notice."""

import asyncio
import logging

from signup_form.config import get_settings
from signup_form.enums import NoticeState

logger = logging.getLogger(__name__)


class TransientNotice:
    """idle -> shown on show(); shown -> idle when the dismissal timer fires.

    At most one dismissal is pending. show() while shown restarts the timer.
    """

    def __init__(self, delay: float | None = None):
        self.delay = delay if delay is not None else get_settings().notice_dismiss_seconds
        self.state = NoticeState.idle
        self._handle: asyncio.TimerHandle | None = None

    @property
    def visible(self) -> bool:
        return self.state is NoticeState.shown

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def show(self) -> None:
        """Must be called from a running event loop."""
        loop = asyncio.get_running_loop()
        self._cancel_timer()
        self.state = NoticeState.shown
        self._handle = loop.call_later(self.delay, self._dismiss)
        logger.debug("Notice shown, dismissing in %.2fs", self.delay)

    def cancel(self) -> None:
        self._cancel_timer()
        self.state = NoticeState.idle

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _dismiss(self) -> None:
        self._handle = None
        self.state = NoticeState.idle
        logger.debug("Notice dismissed")
