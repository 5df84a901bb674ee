import asyncio

from eisenhower_board.clipboard import ClipboardError
from eisenhower_board.session import BoardSession
from eisenhower_board.summary import render


def test_session_summary_tracks_state():
    session = BoardSession()
    assert session.summary == render(session.state.buckets)

    session.submit("Write report\nCall client")
    assert session.summary.endswith("Unimportant & Not Urgent:\nWrite report\nCall client")

    assert session.drop("1", "Important & Urgent")
    assert session.summary.startswith("Important & Urgent:\nWrite report\n")


def test_subscribers_notified_on_every_drop():
    session = BoardSession()
    session.submit("a")
    calls = []
    unsubscribe = session.subscribe(lambda state, summary: calls.append(summary))

    assert session.drop(1, "Important & Urgent")
    assert not session.drop(7, "Important & Urgent")
    assert len(calls) == 2
    assert calls[-1] == session.summary

    unsubscribe()
    session.drop(1, "Unimportant & Urgent")
    assert len(calls) == 2


def test_unknown_drop_leaves_buckets_unchanged():
    session = BoardSession()
    session.submit("a\nb")
    before = dict(session.state.buckets)
    assert not session.drop(99, "Important & Urgent")
    assert dict(session.state.buckets) == before


def test_reset_clears_registry():
    session = BoardSession()
    session.submit("a\nb")
    session.reset()
    assert session.state.tasks == ()
    assert session.submit("c")[0].id == 1


def test_copy_uses_writer():
    session = BoardSession()
    session.submit("a")
    copied = []

    async def writer(text):
        await asyncio.sleep(0)
        copied.append(text)

    assert session.copy(writer)
    assert copied == [session.summary]


def test_copy_failure_returns_false():
    session = BoardSession()

    async def writer(text):
        raise ClipboardError("denied")

    assert not session.copy(writer)
