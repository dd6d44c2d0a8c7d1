import signal

import pytest

from stormphrax import ctrlc


@pytest.fixture
def restore_signals():
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGTERM)}
    yield
    for s, h in saved.items():
        signal.signal(s, h)


def test_handlers_run_on_sigint(restore_signals):
    calls = []
    ctrlc.add_ctrl_c_handler(lambda: calls.append("first"))
    ctrlc.add_ctrl_c_handler(lambda: calls.append("second"))
    ctrlc.init()
    installed = signal.getsignal(signal.SIGINT)
    assert callable(installed)
    installed(signal.SIGINT, None)
    assert calls[-2:] == ["first", "second"]


def test_sigterm_uses_same_dispatch(restore_signals):
    calls = []
    ctrlc.add_ctrl_c_handler(lambda: calls.append(1))
    ctrlc.init()
    assert signal.getsignal(signal.SIGTERM) is signal.getsignal(signal.SIGINT)
    signal.getsignal(signal.SIGTERM)(signal.SIGTERM, None)
    assert calls == [1]