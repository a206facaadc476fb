import threading
import time

from trafficctl.modes import TIMEOUT_MESSAGE, ModeController


class Recorder:
    def __init__(self):
        self.sent = []
        self.restarted = threading.Event()
        self.restarts = 0
        self.bootloader_calls = 0

    def send(self, text):
        self.sent.append(text)

    def restart(self):
        self.restarts += 1
        self.restarted.set()

    def bootloader(self):
        self.bootloader_calls += 1


def make(rec, **kwargs):
    return ModeController(rec.send, rec.restart, rec.bootloader, **kwargs)


def test_config_timeout_restarts_and_notifies():
    rec = Recorder()
    modes = make(rec, config_timeout=0.05)
    modes.enter_config()
    assert rec.restarted.wait(2.0)
    assert rec.sent == [TIMEOUT_MESSAGE]
    assert rec.restarts == 1
    assert modes.active is False


def test_update_timeout_restarts_and_notifies():
    rec = Recorder()
    modes = make(rec, update_timeout=0.05)
    modes.enter_update()
    assert rec.restarted.wait(2.0)
    assert rec.sent == [TIMEOUT_MESSAGE]


def test_cancel_stops_watchdog():
    rec = Recorder()
    modes = make(rec, config_timeout=0.05)
    modes.enter_config()
    assert modes.active is True
    modes.cancel()
    time.sleep(0.2)
    assert rec.restarts == 0
    assert rec.sent == []


def test_refresh_postpones_expiry():
    rec = Recorder()
    modes = make(rec, config_timeout=0.4)
    modes.enter_config()
    time.sleep(0.25)
    modes.refresh_config_timer()
    time.sleep(0.25)
    assert rec.restarts == 0
    assert rec.restarted.wait(2.0)
    assert rec.restarts == 1


def test_refresh_without_watchdog_does_nothing():
    rec = Recorder()
    modes = make(rec)
    modes.refresh_config_timer()
    assert modes.active is False


def test_zero_timeout_starts_nothing():
    rec = Recorder()
    modes = make(rec, config_timeout=0)
    modes.enter_config()
    assert modes.active is False


def test_exit_config_restarts_immediately():
    rec = Recorder()
    modes = make(rec, config_timeout=10.0)
    modes.enter_config()
    modes.exit_config()
    assert rec.restarts == 1
    assert modes.active is False
    assert rec.sent == []


def test_exit_update_restarts():
    rec = Recorder()
    modes = make(rec)
    modes.exit_update()
    assert rec.restarts == 1


def test_bootloader_called_when_available():
    rec = Recorder()
    modes = make(rec)
    modes.enter_bootloader()
    assert rec.bootloader_calls == 1
    assert rec.restarts == 0


def test_bootloader_falls_back_to_restart():
    rec = Recorder()
    modes = ModeController(rec.send, rec.restart)
    modes.enter_bootloader()
    assert rec.restarts == 1