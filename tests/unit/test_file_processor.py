"""
Unit tests for trace_visualizer.processors.file_processor module.
"""
import pytest
from trace_visualizer.core.errors import ParseError
from trace_visualizer.processors.file_processor import TraceFileProcessor


class TestProcessFile:
    """Tests for reading trace files with the streaming parser."""

    def test_reads_object(self, temp_json_file, otlp_trace):
        path = temp_json_file(otlp_trace)
        data = TraceFileProcessor.process_file(path)
        assert data == otlp_trace

    def test_reads_top_level_array(self, temp_json_file, nested_trace):
        path = temp_json_file(nested_trace)
        assert TraceFileProcessor.process_file(path) == nested_trace

    def test_floats_are_not_decimals(self, temp_json_file):
        path = temp_json_file([{"spanId": "a", "startTime": 1.5}])
        data = TraceFileProcessor.process_file(path)
        assert isinstance(data[0]["startTime"], float)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"spans": [{"spanId": "a"')
        with pytest.raises(ParseError):
            TraceFileProcessor.process_file(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("")
        with pytest.raises(ParseError):
            TraceFileProcessor.process_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TraceFileProcessor.process_file(str(tmp_path / "nope.json"))

    def test_progress_output(self, temp_json_file, capsys):
        path = temp_json_file([])
        TraceFileProcessor.process_file(path)
        captured = capsys.readouterr()
        assert "Processing" in captured.out
        assert "Completed reading file" in captured.out


class TestProcessText:
    """Tests for parsing trace text."""

    def test_valid_text(self):
        assert TraceFileProcessor.process_text('{"data": []}') == {"data": []}

    def test_invalid_text(self):
        with pytest.raises(ParseError) as exc_info:
            TraceFileProcessor.process_text("not json")
        assert "Invalid JSON" in str(exc_info.value)
