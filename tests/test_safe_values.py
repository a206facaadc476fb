import threading

from trafficctl.safe_values import SafeValue


def test_initial_value_is_returned():
    assert SafeValue(False).get() is False


def test_set_then_get():
    value = SafeValue(0)
    value.set(200)
    assert value.get() == 200


def test_last_write_wins():
    value = SafeValue("a")
    for item in ("b", "c", "d"):
        value.set(item)
    assert value.get() == "d"


def test_concurrent_writers_leave_a_written_value():
    value = SafeValue(-1)
    written = list(range(16))

    def writer(n):
        for _ in range(200):
            value.set(n)

    threads = [threading.Thread(target=writer, args=(n,)) for n in written]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert value.get() in written


def test_repr_shows_value():
    assert repr(SafeValue(True)) == "SafeValue(True)"