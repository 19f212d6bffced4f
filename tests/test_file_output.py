import pytest

from alertsink.file_output import FileOutput
from alertsink.outputs import Message, OutputConfig, OutputError, Priority


def _msg(text):
    return Message(ts=0, priority=Priority.WARNING, msg=text)


def _output(path, keep_alive=False, buffered=False):
    options = {"filename": str(path)}
    if keep_alive:
        options["keep_alive"] = "true"
    return FileOutput(OutputConfig("file", options), buffered, "host", False)


def test_writes_lines(tmp_path):
    path = tmp_path / "events.txt"
    out = _output(path)
    out.output(_msg("first"))
    out.output(_msg("second"))
    assert path.read_text() == "first\nsecond\n"


def test_appends_to_existing_file(tmp_path):
    path = tmp_path / "events.txt"
    path.write_text("old\n")
    _output(path).output(_msg("new"))
    assert path.read_text() == "old\nnew\n"


def test_keep_alive_unbuffered_visible_immediately(tmp_path):
    path = tmp_path / "events.txt"
    out = _output(path, keep_alive=True)
    out.output(_msg("one"))
    assert path.read_text() == "one\n"
    out.output(_msg("two"))
    out.cleanup()
    assert path.read_text() == "one\ntwo\n"


def test_keep_alive_buffered_flushed_on_cleanup(tmp_path):
    path = tmp_path / "events.txt"
    out = _output(path, keep_alive=True, buffered=True)
    out.output(_msg("alpha"))
    out.cleanup()
    assert path.read_text() == "alpha\n"


def test_reopen_after_file_moved(tmp_path):
    path = tmp_path / "events.txt"
    rotated = tmp_path / "events.txt.1"
    out = _output(path, keep_alive=True)
    out.output(_msg("before"))
    path.rename(rotated)
    out.reopen()
    out.output(_msg("after"))
    out.cleanup()
    assert rotated.read_text() == "before\n"
    assert path.read_text() == "after\n"


def test_open_failure_raises(tmp_path):
    out = _output(tmp_path / "missing" / "events.txt")
    with pytest.raises(OutputError, match="failed to open output file"):
        out.output(_msg("x"))


def test_missing_filename_option_raises():
    out = FileOutput(OutputConfig("file"), False, "host", False)
    with pytest.raises(OutputError):
        out.output(_msg("x"))