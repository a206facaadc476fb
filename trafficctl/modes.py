"""Entering and leaving the configuration, update and bootloader modes."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

log = logging.getLogger(__name__)

CONFIG_TIMEOUT = 10.0
"""Seconds without a new configuration before the controller restarts."""
UPDATE_TIMEOUT = 5.0
"""Seconds to wait for the update confirmation before restarting."""
TIMEOUT_MESSAGE = "<N_C_TO>"


class ModeController:
    """Runs a one-shot watchdog while a mode is active.

    When the watchdog expires the host is told with ``TIMEOUT_MESSAGE`` and the
    controller restarts.
    """

    def __init__(
        self,
        send: Callable[[str], None],
        restart: Callable[[], None],
        enter_bootloader: Optional[Callable[[], None]] = None,
        config_timeout: float = CONFIG_TIMEOUT,
        update_timeout: float = UPDATE_TIMEOUT,
    ) -> None:
        self._send = send
        self._restart = restart
        self._bootloader = enter_bootloader
        self._config_timeout = config_timeout
        self._update_timeout = update_timeout
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._on_expire: Optional[Callable[[], None]] = None
        self._interval = 0.0
        self._generation = 0

    @property
    def active(self) -> bool:
        """True while a watchdog is running."""
        with self._lock:
            return self._timer is not None

    def _arm(self) -> None:
        # Caller holds the lock.
        self._generation += 1
        generation = self._generation
        timer = threading.Timer(self._interval, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _disarm(self) -> None:
        # Caller holds the lock.
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _start(self, timeout: float, on_expire: Callable[[], None]) -> None:
        with self._lock:
            self._disarm()
            if timeout <= 0:
                return
            self._interval = timeout
            self._on_expire = on_expire
            self._arm()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            callback = self._on_expire
        if callback is not None:
            callback()

    def _config_expired(self) -> None:
        self._send(TIMEOUT_MESSAGE)
        log.debug("configuration timeout")
        self.exit_config()

    def _update_expired(self) -> None:
        self._send(TIMEOUT_MESSAGE)
        log.debug("update timeout")
        self.exit_update()

    def enter_config(self) -> None:
        """Start the configuration watchdog."""
        self._start(self._config_timeout, self._config_expired)

    def enter_update(self) -> None:
        """Start the update watchdog."""
        self._start(self._update_timeout, self._update_expired)

    def exit_config(self) -> None:
        """Restart the controller so the new configuration is applied."""
        self.cancel()
        self._restart()

    def exit_update(self) -> None:
        """Restart the controller without changes."""
        self.cancel()
        self._restart()

    def refresh_config_timer(self) -> None:
        """Start the running watchdog's interval over."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._arm()

    def enter_bootloader(self) -> None:
        """Reboot into the bootloader, or plainly restart if there is none."""
        self.cancel()
        if self._bootloader is not None:
            log.debug("entering bootloader")
            self._bootloader()
        else:
            log.debug("bootloader not enabled")
            self._restart()

    def cancel(self) -> None:
        """Stop the watchdog without restarting."""
        with self._lock:
            self._disarm()