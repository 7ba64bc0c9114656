import logging
from typing import Union

from signup.state import Mode

logger = logging.getLogger(__name__)


class ModeSelector:
    """Tracks which of the two profile variants is active."""

    def __init__(self, initial: Mode = Mode.PERSONAL):
        self._mode = Mode(initial)

    @property
    def mode(self) -> Mode:
        return self._mode

    def is_active(self, mode: Union[Mode, str]) -> bool:
        return self._mode is Mode(mode)

    def select_mode(self, mode: Union[Mode, str]) -> Mode:
        # Mode() raises ValueError for anything outside the enum
        new_mode = Mode(mode)
        if new_mode is not self._mode:
            logger.debug("Switching mode %s -> %s", self._mode.value, new_mode.value)
        self._mode = new_mode
        return self._mode
