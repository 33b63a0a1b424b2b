import io
import threading

import pytest

from stx.panic import (
    Panic,
    ReportQuery,
    SourceLocation,
    begin_panic,
    format_panic,
    panic,
    panic_default,
    report,
)


def test_panic_raises_with_info():
    with pytest.raises(Panic) as caught:
        panic("crash and burn!")
    assert caught.value.info == "crash and burn!"
    assert caught.value.error_report == ""
    assert str(caught.value) == "crash and burn!"


def test_panic_default_info():
    with pytest.raises(Panic) as caught:
        panic()
    assert caught.value.info == "explicit panic"


def test_panic_with_value_reports_it():
    with pytest.raises(Panic) as caught:
        panic("called `Result::unwrap()` on an `Err` value", "emergency failure")
    assert caught.value.error_report == "emergency failure"
    assert str(caught.value) == (
        "called `Result::unwrap()` on an `Err` value: emergency failure"
    )


def test_panic_location_defaults_to_caller():
    with pytest.raises(Panic) as caught:
        panic("here")
    location = caught.value.location
    assert location.file == __file__
    assert location.function == "test_panic_location_defaults_to_caller"
    assert location.line > 0


def test_panic_explicit_location():
    where = SourceLocation("f.py", 10, 3, "fn")
    with pytest.raises(Panic) as caught:
        panic("x", location=where)
    assert caught.value.location == where


def test_panic_rejects_two_values():
    with pytest.raises(TypeError):
        panic("x", 1, 2)


def test_panic_writes_report_to_stderr(capsys):
    with pytest.raises(Panic):
        panic("crash and burn!")
    err = capsys.readouterr().err
    assert "panicked with: 'crash and burn!'" in err
    assert "Backtrace:" in err


def test_source_location_current():
    location = SourceLocation.current()
    assert location.file == __file__
    assert location.function == "test_source_location_current"


def test_report_strings_whole():
    text = "x" * 1000
    assert report(text, 4) == text


def test_report_integers():
    assert report(42) == str(42)
    assert report(-7) == str(-7)
    assert report(2**32 - 1) == str(2**32 - 1)


def test_report_out_of_range_and_other_values_are_empty():
    assert report(2**40) == ""
    assert report(-(2**31) - 1) == ""
    assert report(object()) == ""
    assert report(True) == ""
    assert report(3.5) == ""


def test_report_size_limits():
    assert report(5, 0) == ""
    assert report(12345, 3) == "12"


def test_report_query():
    assert ReportQuery(3).report(12345) == report(12345, 3)
    assert ReportQuery().report(99) == str(99)


def test_format_panic_full():
    where = SourceLocation("f.py", 10, 3, "fn")
    text = format_panic("boom", "42", where, 7)
    assert text.startswith("\nthread with hash: '7' ")
    assert "panicked with: 'boom: 42'" in text
    assert text.endswith("at function: 'fn' [f.py:10:3]\n")


def test_format_panic_unknown_position_and_no_report():
    where = SourceLocation("f.py", 0, 0, "fn")
    text = format_panic("boom", "", where)
    assert text == "\nthread panicked with: 'boom' at function: 'fn' [f.py:unknown:unknown]\n"


def test_panic_default_writes_headline_then_backtrace():
    where = SourceLocation("f.py", 1, 1, "fn")
    out = io.StringIO()
    panic_default("boom", "", where, out)
    written = out.getvalue()
    assert written.startswith(format_panic("boom", "", where, threading.get_ident()))
    assert "\nBacktrace:\nip: Instruction Pointer,  sp: Stack Pointer\n\n" in written
    assert "test_panic_default_writes_headline_then_backtrace" in written


def test_begin_panic_raises():
    where = SourceLocation("f.py", 2, 2, "fn")
    with pytest.raises(Panic) as caught:
        begin_panic("info", "report", where)
    assert caught.value.error_report == "report"
    assert caught.value.location == where