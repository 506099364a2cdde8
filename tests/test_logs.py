import io

from slovle.logs import make_loggers


def test_quiet_by_default():
    out = io.StringIO()
    log, log_debug = make_loggers(stream=out)
    log("hello")
    log_debug("details")
    assert out.getvalue() == ""


def test_verbose():
    out = io.StringIO()
    log, log_debug = make_loggers(verbose=True, stream=out)
    log("hello")
    log_debug("details")
    assert out.getvalue().endswith("] hello\n")
    assert "DEBUG" not in out.getvalue()


def test_debug_implies_verbose():
    out = io.StringIO()
    log, log_debug = make_loggers(debug=True, stream=out)
    log("hello")
    log_debug("details")
    lines = out.getvalue().splitlines()
    assert lines[0].endswith("] hello")
    assert lines[1].endswith("] DEBUG details")
