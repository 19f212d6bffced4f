import syslog

import pytest

from alertsink.outputs import Message, Output, OutputConfig, OutputError, Priority


class _Recorder(Output):
    def __init__(self, *args):
        super().__init__(*args)
        self.seen = []

    def output(self, msg):
        self.seen.append(msg.msg)


@pytest.mark.parametrize(
    "priority, level",
    [
        (Priority.EMERGENCY, syslog.LOG_EMERG),
        (Priority.ALERT, syslog.LOG_ALERT),
        (Priority.CRITICAL, syslog.LOG_CRIT),
        (Priority.ERROR, syslog.LOG_ERR),
        (Priority.WARNING, syslog.LOG_WARNING),
        (Priority.NOTICE, syslog.LOG_NOTICE),
        (Priority.INFORMATIONAL, syslog.LOG_INFO),
        (Priority.DEBUG, syslog.LOG_DEBUG),
    ],
)
def test_priority_matches_syslog_levels(priority, level):
    assert int(priority) == level


@pytest.mark.parametrize("priority", list(Priority))
def test_priority_parse_round_trips_label(priority):
    assert Priority.parse(priority.label) is priority
    assert Priority.parse(priority.name.lower()) is priority


def test_priority_label():
    parsed = Priority.parse("warning")
    assert parsed.label == "Warning"


def test_priority_parse_unknown_raises():
    with pytest.raises(OutputError):
        Priority.parse("loud")


def test_output_is_abstract():
    with pytest.raises(TypeError):
        Output(OutputConfig("x"), True, "host", False)


def test_output_keeps_init_values():
    out = _Recorder(OutputConfig("rec", {"a": "b"}), False, "myhost", True)
    assert out.name == "rec"
    assert out.buffered is False
    assert out.hostname == "myhost"
    assert out.json_output is True
    assert out.config.options == {"a": "b"}


def test_output_default_reopen_and_cleanup_leave_output_usable():
    out = _Recorder(OutputConfig("rec"), True, "h", False)
    out.reopen()
    out.cleanup()
    out.output(Message(ts=0, priority=Priority.NOTICE, msg="hello"))
    assert out.seen == ["hello"]


def test_message_defaults_are_independent():
    first = Message(ts=1, priority=Priority.DEBUG, msg="a")
    second = Message(ts=2, priority=Priority.DEBUG, msg="b")
    first.fields["k"] = "v"
    first.tags.add("t")
    assert second.fields == {}
    assert second.tags == set()
    assert first.rule == ""
    assert first.source == ""