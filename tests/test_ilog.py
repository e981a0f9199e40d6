"""Tests for iprint.ilog — indented stdlib logging."""

import logging
import sys

import pytest

from iprint import (
    TRACE, enter_scope, get_logger, idebug, ierror, iinfo, ilog, itrace, iwarn, scoped,
)


@pytest.fixture
def records(caplog):
    """Capture everything the iprint logger emits, down to TRACE."""
    caplog.set_level(TRACE, logger="iprint")
    return caplog


class TestSeverities:
    """Each helper logs at its own level."""

    @pytest.mark.parametrize("helper,level,name", [
        (itrace, TRACE, "TRACE"),
        (idebug, logging.DEBUG, "DEBUG"),
        (iinfo, logging.INFO, "INFO"),
        (iwarn, logging.WARNING, "WARNING"),
        (ierror, logging.ERROR, "ERROR"),
    ])
    def test_level(self, records, helper, level, name):
        """Records carry the expected level and level name."""
        helper("message")
        [record] = records.records
        assert record.levelno == level
        assert record.levelname == name
        assert record.name == "iprint"

    def test_ilog_arbitrary_level(self, records):
        """ilog() accepts any numeric level."""
        ilog(logging.INFO + 5, "custom")
        assert records.records[0].levelno == logging.INFO + 5


class TestIndentation:
    """The record message is already indented."""

    def test_indented_by_depth(self, records, unit):
        """Messages follow the current call depth."""
        @scoped
        def load(path):
            iinfo("reading %s", path)

        iinfo("start")
        load("a.csv")
        iinfo("end")
        assert [r.getMessage() for r in records.records] == [
            "start", unit + "reading a.csv", "end",
        ]

    def test_multiline_all_lines_indented(self, records, unit):
        """Arguments are merged before indenting each line."""
        with enter_scope():
            iwarn("first %s\nsecond %s", 1, 2)
        assert records.records[0].getMessage() == f"{unit}first 1\n{unit}second 2"

    def test_percent_without_args_is_literal(self, records):
        """No args means no %-interpolation."""
        iinfo("100% done")
        assert records.records[0].getMessage() == "100% done"

    def test_non_string_message(self, records):
        """Non-string messages are converted with str()."""
        iinfo({"a": 1})
        assert records.records[0].getMessage() == "{'a': 1}"

    def test_single_mapping_argument(self, records, unit):
        """One dict argument fills named placeholders, as in logging."""
        with enter_scope():
            iinfo("%(user)s logged in from %(host)s", {"user": "ann", "host": "db1"})
        assert records.records[0].getMessage() == f"{unit}ann logged in from db1"

    def test_empty_mapping_is_positional(self, records):
        """An empty dict is an ordinary positional argument."""
        iinfo("options: %s", {})
        assert records.records[0].getMessage() == "options: {}"


class _ErrorRecorder(logging.Handler):
    """Handler that records formatting failures instead of printing them."""

    def __init__(self):
        super().__init__()
        self.emitted = []
        self.errors = []

    def emit(self, record):
        try:
            self.emitted.append(record.getMessage())
        except Exception:
            self.handleError(record)

    def handleError(self, record):
        self.errors.append(record)


@pytest.fixture
def isolated_logger():
    """A non-propagating logger with an error-recording handler."""
    log = logging.getLogger("iprint.tests.bad_args")
    handler = _ErrorRecorder()
    log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    try:
        yield log, handler
    finally:
        log.removeHandler(handler)
        log.propagate = True
        log.setLevel(logging.NOTSET)


class TestBadArguments:
    """Mismatched arguments go to the handler, not the caller."""

    @pytest.mark.parametrize("msg,args", [
        ("rate %d", ("x",)),
        ("%s and %s", ("only one",)),
        ("%(missing)s", ({"present": 1},)),
    ])
    def test_does_not_raise(self, isolated_logger, msg, args):
        """The record reaches Handler.handleError like plain logging."""
        log, handler = isolated_logger
        with enter_scope():
            iinfo(msg, *args, logger=log)
        assert handler.emitted == []
        [record] = handler.errors
        assert record.msg == msg

    def test_good_call_after_bad_one(self, isolated_logger):
        """Logging keeps working after a bad call."""
        log, handler = isolated_logger
        iwarn("rate %d", "x", logger=log)
        iwarn("rate %d", 5, logger=log)
        assert handler.emitted == ["rate 5"]
        assert len(handler.errors) == 1


class TestLoggerSelection:
    """logger= accepts names, loggers and adapters."""

    def test_by_name(self, caplog):
        """A logger name is resolved with logging.getLogger."""
        caplog.set_level(logging.DEBUG, logger="myapp")
        idebug("hello", logger="myapp")
        assert caplog.records[0].name == "myapp"

    def test_logger_object(self, caplog):
        """A Logger instance is used as is."""
        log = logging.getLogger("myapp.sub")
        caplog.set_level(logging.INFO, logger="myapp.sub")
        iinfo("hello", logger=log)
        assert caplog.records[0].name == "myapp.sub"

    def test_get_logger_child(self):
        """get_logger(name) returns a child of the iprint logger."""
        assert get_logger().name == "iprint"
        assert get_logger("db").name == "iprint.db"

    def test_disabled_level_skips_formatting(self, caplog):
        """Below the logger level nothing is formatted or emitted."""
        caplog.set_level(logging.WARNING, logger="iprint")

        class Exploding:
            def __str__(self):
                raise AssertionError("formatted a disabled record")

        idebug("%s", Exploding())
        assert caplog.records == []


class TestCallerAttribution:
    """Records point at the caller, not at iprint internals."""

    @pytest.mark.skipif(sys.version_info < (3, 11),
                        reason="stacklevel counts from the caller only on 3.11+")
    def test_funcname_is_caller(self, records):
        """funcName and filename name the calling test."""
        iinfo("where am I")
        itrace("and here")
        ilog(logging.INFO, "and via ilog")
        for record in records.records:
            assert record.funcName == "test_funcname_is_caller"
            assert record.filename == "test_ilog.py"

    def test_exc_info_passed_through(self, records):
        """Extra logging kwargs reach Logger.log."""
        try:
            raise ValueError("bad")
        except ValueError:
            ierror("failed", exc_info=True)
        assert records.records[0].exc_info[0] is ValueError
