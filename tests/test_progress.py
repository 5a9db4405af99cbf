import io
import re

from morsewav.progress import Progress


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def make_clock(*times):
    values = iter(times)
    return lambda: next(values)


def test_quiet_disables_output():
    stream = FakeTTY()
    pb = Progress(10, quiet=True, stream=stream, clock=make_clock(0.0, 1.0, 2.0))
    pb.update(5)
    pb.finish()
    assert pb.enabled is False
    assert stream.getvalue() == ""


def test_non_tty_disables_output():
    stream = io.StringIO()
    pb = Progress(10, stream=stream, clock=make_clock(0.0))
    pb.update(3)
    pb.finish()
    assert pb.enabled is False
    assert stream.getvalue() == ""


def test_initial_line():
    stream = FakeTTY()
    pb = Progress(10, stream=stream, clock=make_clock(0.0))
    assert pb.enabled is True
    assert stream.getvalue() == "[0/10]"


def test_update_complete_has_zero_eta():
    stream = FakeTTY()
    pb = Progress(10, stream=stream, clock=make_clock(0.0, 0.2))
    pb.update(10)
    out = stream.getvalue()
    assert "100%" in out
    assert "[10/10]" in out
    assert out.endswith("ETA   0 ms")
    assert pb.current == 10


def test_update_short_eta_in_milliseconds():
    stream = FakeTTY()
    pb = Progress(10, stream=stream, clock=make_clock(0.0, 0.5))
    pb.update(5)
    assert stream.getvalue().endswith("[5/10] ETA 500 ms")


def test_update_long_eta_in_minutes():
    stream = FakeTTY()
    pb = Progress(3, stream=stream, clock=make_clock(0.0, 30.0))
    pb.update(1)
    out = stream.getvalue()
    assert out.endswith("[1/3] ETA 01:00")
    assert re.search(r"\r\033\[92m\s*\d+%\033\[0m", out)


def test_repeated_position_writes_nothing():
    stream = FakeTTY()
    pb = Progress(4, stream=stream, clock=make_clock(0.0, 0.1))
    pb.update(2)
    before = stream.getvalue()
    pb.update(2)
    assert stream.getvalue() == before


def test_finish_short_elapsed():
    stream = FakeTTY()
    pb = Progress(7, stream=stream, clock=make_clock(0.0, 0.3))
    pb.finish()
    out = stream.getvalue()
    assert "100%" in out
    assert "[7/7] Done" in out
    assert re.search(r" \| Elapsed \d+ ms\n$", out)


def test_finish_long_elapsed():
    stream = FakeTTY()
    pb = Progress(7, stream=stream, clock=make_clock(0.0, 3725.0))
    pb.finish()
    assert stream.getvalue().endswith(" | Elapsed 01:02:05\n")


def test_finish_elapsed_format_for_seconds():
    stream = FakeTTY()
    pb = Progress(2, stream=stream, clock=make_clock(0.0, 12.0))
    pb.finish()
    out = stream.getvalue()
    assert out.endswith("[2/2] Done | Elapsed 00:00:12\n")