import threading

import pytest

from sighook import consts
from sighook.exfiltrator import Exfiltrator, SignalOnly


def test_fresh_slot_loads_nothing():
    ex = SignalOnly()
    slot = ex.new_slot()
    assert ex.load(slot, consts.SIGUSR1) is None
    assert ex.load(slot, consts.SIGUSR1) is None


def test_store_then_load_returns_signal_once():
    ex = SignalOnly()
    slot = ex.new_slot()
    ex.init(slot, consts.SIGUSR2)
    ex.store(slot, consts.SIGUSR2)
    assert ex.load(slot, consts.SIGUSR2) == consts.SIGUSR2
    assert ex.load(slot, consts.SIGUSR2) is None


def test_repeated_stores_are_collated():
    ex = SignalOnly()
    slot = ex.new_slot()
    for _ in range(10):
        ex.store(slot, consts.SIGTERM)
    assert ex.load(slot, consts.SIGTERM) == consts.SIGTERM
    assert ex.load(slot, consts.SIGTERM) is None


def test_slots_are_independent():
    ex = SignalOnly()
    first = ex.new_slot()
    second = ex.new_slot()
    ex.store(first, consts.SIGINT)
    assert ex.load(second, consts.SIGTERM) is None
    assert ex.load(first, consts.SIGINT) == consts.SIGINT


@pytest.mark.parametrize("sig", [consts.SIGINT, consts.SIGTERM, consts.SIGUSR1, 127])
def test_supports_every_signal(sig):
    assert SignalOnly().supports_signal(sig) is True


def test_load_reports_number_given_by_caller():
    ex = SignalOnly()
    slot = ex.new_slot()
    ex.store(slot, consts.SIGHUP)
    assert ex.load(slot, consts.SIGQUIT) == consts.SIGQUIT


def test_exfiltrator_is_abstract():
    with pytest.raises(TypeError):
        Exfiltrator()


def test_default_init_leaves_slot_untouched():
    ex = SignalOnly()
    slot = ex.new_slot()
    ex.init(slot, consts.SIGUSR1)
    assert ex.load(slot, consts.SIGUSR1) is None
    ex.store(slot, consts.SIGUSR1)
    assert ex.load(slot, consts.SIGUSR1) == consts.SIGUSR1


def test_signal_only_instances_compare_equal():
    first = SignalOnly()
    second = SignalOnly()
    assert first == second
    slot = first.new_slot()
    first.store(slot, consts.SIGHUP)
    assert second.load(slot, consts.SIGHUP) == consts.SIGHUP


def test_concurrent_stores_are_seen():
    ex = SignalOnly()
    slot = ex.new_slot()
    threads = [
        threading.Thread(target=ex.store, args=(slot, consts.SIGUSR1))
        for _ in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert ex.load(slot, consts.SIGUSR1) == consts.SIGUSR1
    assert ex.load(slot, consts.SIGUSR1) is None