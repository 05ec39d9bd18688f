#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_io.py
"""Unit tests for output destinations and the sink life cycle."""

from io import BytesIO, StringIO

import pytest

from docsink import OutputWriteError, RenderingError, XhtmlSink, XhtmlSinkOptions
from docsink.utils.io_utils import OutputDestination


def write_paragraph(sink, text="Hi"):
    sink.paragraph()
    sink.text(text)
    sink.paragraph_end()


@pytest.mark.unit
class TestDestinations:
    """Tests for the supported output targets."""

    def test_path_owned(self, tmp_path):
        """Test that a path is written and closed by the sink."""
        target = tmp_path / "out.html"
        with XhtmlSink(target) as sink:
            write_paragraph(sink)
        assert target.read_text(encoding="utf-8") == "<p>Hi</p>"

    def test_str_path(self, tmp_path):
        """Test that string paths are accepted."""
        target = tmp_path / "out.html"
        sink = XhtmlSink(str(target))
        write_paragraph(sink, "ü")
        sink.close()
        assert target.read_text(encoding="utf-8") == "<p>ü</p>"

    def test_path_line_endings_untranslated(self, tmp_path):
        """Test that the line separator reaches the file unchanged."""
        target = tmp_path / "out.html"
        with XhtmlSink(target, XhtmlSinkOptions(line_separator="\r\n")) as sink:
            sink.text("a\nb")
        assert target.read_bytes() == b"a\r\nb"

    def test_text_stream_borrowed(self):
        """Test that a text stream is flushed but left open."""
        stream = StringIO()
        with XhtmlSink(stream) as sink:
            write_paragraph(sink)
        assert not stream.closed
        assert stream.getvalue() == "<p>Hi</p>"

    def test_binary_stream_encoded(self):
        """Test that binary streams receive encoded bytes."""
        stream = BytesIO()
        with XhtmlSink(stream, XhtmlSinkOptions(encoding="latin-1")) as sink:
            write_paragraph(sink, "é")
        assert stream.getvalue() == "<p>é</p>".encode("latin-1")

    def test_unwritable_path(self, tmp_path):
        """Test that a path in a missing directory raises OutputWriteError."""
        with pytest.raises(OutputWriteError) as exc_info:
            XhtmlSink(tmp_path / "missing" / "out.html")
        assert exc_info.value.file_path.endswith("out.html")
        assert isinstance(exc_info.value.original_error, OSError)

    def test_unsupported_target(self):
        """Test that other objects are rejected."""
        with pytest.raises(TypeError):
            OutputDestination(42)


@pytest.mark.unit
class TestLifeCycle:
    """Tests for flush and close behavior."""

    def test_write_after_close(self):
        """Test that writing to a closed sink raises RenderingError."""
        sink = XhtmlSink()
        sink.close()
        with pytest.raises(RenderingError):
            sink.paragraph()

    def test_close_twice(self):
        """Test that closing again is harmless."""
        sink = XhtmlSink()
        sink.close()
        sink.close()
        assert sink.closed

    def test_getvalue_after_close(self):
        """Test that the buffer content survives closing."""
        sink = XhtmlSink()
        write_paragraph(sink)
        sink.close()
        assert sink.getvalue() == "<p>Hi</p>"

    def test_getvalue_on_borrowed_stream(self):
        """Test that getvalue() is only available for the internal buffer."""
        sink = XhtmlSink(StringIO())
        with pytest.raises(TypeError):
            sink.getvalue()

    def test_flush(self):
        """Test that flush() passes through to the stream."""
        flushed = []

        class Recorder(StringIO):
            def flush(self):
                flushed.append(True)
                super().flush()

        sink = XhtmlSink(Recorder())
        sink.flush()
        assert flushed

    def test_failing_stream(self):
        """Test that stream errors are wrapped in OutputWriteError."""

        class Broken(StringIO):
            def write(self, text):
                raise OSError("disk full")

        sink = XhtmlSink(Broken())
        with pytest.raises(OutputWriteError) as exc_info:
            sink.text("x")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_reset_state(self):
        """Test that reset_state() starts a fresh render state."""
        sink = XhtmlSink()
        sink.head()
        sink.table_row()
        sink.reset_state()
        assert not sink.state.head_mode
        assert sink.state.row_is_even
