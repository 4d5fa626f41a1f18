import threading

from rldpnet.transfer_state import IncomingTransferState, OutgoingTransferState


def test_incoming_updates_start_at_zero_and_count():
    state = IncomingTransferState()
    assert state.updates() == 0
    state.increase_updates()
    state.increase_updates()
    assert state.updates() == 2


def test_incoming_updates_are_thread_safe():
    state = IncomingTransferState()
    threads_count = 4
    per_thread = 500

    def worker():
        for _ in range(per_thread):
            state.increase_updates()

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert state.updates() == threads_count * per_thread


def test_part_advances_only_to_next():
    state = OutgoingTransferState()
    assert state.part() == 0
    state.set_part(1)
    assert state.part() == 1
    state.set_part(3)
    assert state.part() == 1
    state.set_part(2)
    assert state.part() == 2


def test_part_zero_is_noop():
    state = OutgoingTransferState()
    state.set_part(0)
    assert state.part() == 0


def test_part_does_not_go_back():
    state = OutgoingTransferState()
    state.set_part(1)
    state.set_part(1)
    assert state.part() == 1


def test_reply_flag():
    state = OutgoingTransferState()
    assert state.has_reply() is False
    state.set_reply()
    assert state.has_reply() is True


def test_seqno_out_keeps_maximum():
    state = OutgoingTransferState()
    state.set_seqno_out(5)
    state.set_seqno_out(3)
    assert state.seqno_out() == 5
    state.set_seqno_out(7)
    assert state.seqno_out() == 7


def test_seqno_in_ignores_values_above_seqno_out():
    state = OutgoingTransferState()
    state.set_seqno_out(5)
    state.set_seqno_in(10)
    assert state.seqno_in() == 0


def test_seqno_in_keeps_maximum():
    state = OutgoingTransferState()
    state.set_seqno_out(5)
    state.set_seqno_in(4)
    state.set_seqno_in(2)
    assert state.seqno_in() == 4
    state.set_seqno_in(5)
    assert state.seqno_in() == 5