from pyhexdump.dedup import DuplicateDetector, LineAction

A = b"\x00" * 4
B = b"\x01" * 4


def test_pass_through() -> None:
    d = DuplicateDetector(hide=False)
    for i in range(4):
        assert d.feed(i * 4, A) is LineAction.EMIT
    assert d.finish() is None


def test_run_collapses_to_one_marker() -> None:
    d = DuplicateDetector(hide=True)
    assert d.feed(0, A) is LineAction.EMIT
    assert d.feed(4, A) is LineAction.MARKER
    assert d.feed(8, A) is LineAction.SUPPRESS
    assert d.feed(12, A) is LineAction.SUPPRESS
    # data ended inside the run: the last line is flushed with its own offset
    assert d.finish() == (12, A)
    assert d.finish() is None


def test_new_line_ends_run() -> None:
    d = DuplicateDetector(hide=True)
    assert d.feed(0, A) is LineAction.EMIT
    assert d.feed(4, A) is LineAction.MARKER
    assert d.feed(8, B) is LineAction.EMIT
    assert d.feed(12, B) is LineAction.MARKER
    assert d.feed(16, A) is LineAction.EMIT
    assert d.finish() is None


def test_final_short_line_is_always_emitted() -> None:
    d = DuplicateDetector(hide=True)
    assert d.feed(0, A) is LineAction.EMIT
    assert d.feed(4, A) is LineAction.MARKER
    assert d.feed(8, A[:2], final=True) is LineAction.EMIT
    assert d.finish() is None


def test_marker_only_run_is_flushed() -> None:
    d = DuplicateDetector(hide=True)
    assert d.feed(0, A) is LineAction.EMIT
    assert d.feed(4, A) is LineAction.MARKER
    assert d.finish() == (4, A)
