import signal

from cmadness.webserver.shutdown import ShutdownState, install_signal_handlers


def test_request_stop_clears_flag():
    state = ShutdownState()
    assert state.running is True
    state.request_stop(signal.SIGTERM, None)
    assert state.running is False


def test_signal_stops_server():
    state = ShutdownState()
    previous = install_signal_handlers(state)
    try:
        assert signal.getsignal(signal.SIGINT) == state.request_stop
        assert signal.getsignal(signal.SIGTERM) == state.request_stop
        signal.raise_signal(signal.SIGTERM)
        assert state.running is False
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    assert set(previous) == {signal.SIGINT, signal.SIGTERM}