import io
import struct

import pytest

from containerkit.streams import (
    STDERR_LOG,
    STDOUT_LOG,
    Log,
    LogConsumer,
    ProcessOptions,
    demultiplex,
    multiplexed,
)


def _frame(stream, payload):
    return struct.pack(">B3xI", stream, len(payload)) + payload


class _OneByteReader:
    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        return self._data.read(1 if size != 0 else 0)


class _Collector:
    def __init__(self):
        self.messages = []

    def accept(self, log):
        self.messages.append(log)


def test_pinned_stdout_frame():
    data = b"\x01\x00\x00\x00\x00\x00\x00\x05hello"
    assert demultiplex(io.BytesIO(data)) == (b"hello", b"")


def test_split_stdout_and_stderr():
    data = _frame(1, b"out-1 ") + _frame(2, b"err-1") + _frame(1, b"out-2")
    assert demultiplex(io.BytesIO(data)) == (b"out-1 out-2", b"err-1")


def test_stdin_frames_go_to_stdout():
    data = _frame(0, b"in") + _frame(1, b"out")
    stdout, stderr = demultiplex(io.BytesIO(data))
    assert stdout == b"inout"
    assert stderr == b""


def test_unknown_stream_raises():
    with pytest.raises(ValueError, match="Unrecognized input header: 7"):
        demultiplex(io.BytesIO(_frame(7, b"x")))


def test_daemon_error_raises():
    with pytest.raises(ValueError, match="error from daemon in stream: boom"):
        demultiplex(io.BytesIO(_frame(1, b"ok") + _frame(3, b"boom")))


def test_truncated_header_is_ignored():
    data = _frame(1, b"complete") + b"\x01\x00"
    assert demultiplex(io.BytesIO(data)) == (b"complete", b"")


def test_truncated_payload_is_ignored():
    data = _frame(2, b"complete") + _frame(1, b"partial")[:-3]
    assert demultiplex(io.BytesIO(data)) == (b"", b"complete")


def test_short_reads_give_same_result():
    data = _frame(1, b"abc") + _frame(2, b"def") + _frame(1, b"ghi")
    assert demultiplex(_OneByteReader(data)) == demultiplex(io.BytesIO(data))


def test_empty_stream():
    assert demultiplex(io.BytesIO(b"")) == (b"", b"")


def test_multiplexed_option_replaces_reader():
    data = _frame(1, b"uid=0\n") + _frame(2, b"warning\n")
    options = ProcessOptions(reader=io.BytesIO(data))
    multiplexed()(options)
    assert options.reader.read() == b"uid=0\n"


def test_log_equality_and_consumer():
    collector = _Collector()
    assert isinstance(collector, LogConsumer)
    collector.accept(Log(STDOUT_LOG, b"ready\n"))
    collector.accept(Log(STDERR_LOG, b"oops\n"))
    assert collector.messages == [Log("STDOUT", b"ready\n"), Log("STDERR", b"oops\n")]