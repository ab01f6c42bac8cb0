import errno
import signal

import pytest

from sighook import consts
from sighook.low_level import SigId, raise_signal, register, unregister


def test_sigterm_starts_default_and_registration_replaces_it():
    assert signal.getsignal(consts.SIGTERM) == signal.SIG_DFL
    calls = []
    sig_id = register(consts.SIGTERM, lambda: calls.append("term"))
    try:
        raise_signal(consts.SIGTERM)
        assert calls == ["term"]
    finally:
        assert unregister(sig_id) is True


def test_registered_action_runs():
    calls = []
    sig_id = register(consts.SIGUSR1, lambda: calls.append(1))
    try:
        raise_signal(consts.SIGUSR1)
        assert calls == [1]
    finally:
        unregister(sig_id)


def test_sig_id_records_signal():
    sig_id = register(consts.SIGUSR1, lambda: None)
    try:
        assert sig_id.signal == consts.SIGUSR1
    finally:
        unregister(sig_id)


def test_multiple_actions_run_in_order():
    calls = []
    first = register(consts.SIGUSR1, lambda: calls.append("first"))
    second = register(consts.SIGUSR1, lambda: calls.append("second"))
    try:
        assert first != second
        raise_signal(consts.SIGUSR1)
        assert calls == ["first", "second"]
    finally:
        unregister(first)
        unregister(second)


def test_unregister_stops_action_and_keeps_handler():
    calls = []
    sig_id = register(consts.SIGUSR1, lambda: calls.append(1))
    assert unregister(sig_id) is True
    assert unregister(sig_id) is False
    # The default action is not restored, so the process survives this.
    raise_signal(consts.SIGUSR1)
    assert calls == []


def test_unregister_unknown_id():
    assert unregister(SigId(consts.SIGUSR1, -1)) is False


def test_previous_python_handler_is_chained():
    chained = []
    calls = []
    signal.signal(consts.SIGVTALRM, lambda signum, frame: chained.append(signum))
    sig_id = register(consts.SIGVTALRM, lambda: calls.append(1))
    try:
        raise_signal(consts.SIGVTALRM)
        assert chained == [consts.SIGVTALRM]
        assert calls == [1]
    finally:
        unregister(sig_id)


@pytest.mark.parametrize("sig", sorted(consts.FORBIDDEN))
def test_forbidden_signal_rejected(sig):
    with pytest.raises(ValueError):
        register(sig, lambda: None)


def test_invalid_signal_number_rejected():
    with pytest.raises(OSError) as info:
        register(10000, lambda: None)
    assert info.value.errno == errno.EINVAL


def test_raise_invalid_signal():
    with pytest.raises(OSError):
        raise_signal(10000)