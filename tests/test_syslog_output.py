import syslog
from unittest import mock

from alertsink.outputs import Message, OutputConfig, Priority
from alertsink.syslog_output import SyslogOutput


def test_sends_message_at_priority():
    out = SyslogOutput(OutputConfig("syslog"), False, "host", False)
    with mock.patch("syslog.syslog") as fake:
        returned = out.output(Message(ts=0, priority=Priority.ERROR, msg="disk trouble"))
    assert returned is None
    assert out.name == "syslog"
    assert fake.call_args_list == [mock.call(int(Priority.parse("error")), "disk trouble")]
    assert fake.call_args.args[0] == syslog.LOG_ERR


def test_no_trailing_newline():
    out = SyslogOutput(OutputConfig("syslog"), False, "host", False)
    with mock.patch("syslog.syslog") as fake:
        returned = out.output(Message(ts=0, priority=Priority.DEBUG, msg="plain"))
    assert returned is None
    level, text = fake.call_args.args
    assert level == int(Priority.parse("debug")) == syslog.LOG_DEBUG
    assert text == "plain"
    assert not text.endswith("\n")