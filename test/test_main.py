"""命令行与文件偏移测试"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from srt_shift.core.errors import RangeLineError, SameFileError, SubtitleReadError
from srt_shift.main import SubtitleShifter, build_parser, main, split_lines
from srt_shift.utils.config import settings

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:04,000\n"
    "Hello, world!\n"
    "\n"
    "2\n"
    "00:00:00,200 --> 00:00:01,000\n"
    "This is a test.\n"
)


@pytest.fixture
def shifter():
    """创建偏移工具实例"""
    return SubtitleShifter()


@pytest.fixture
def sample_file(tmp_path):
    """创建测试字幕文件"""
    path = tmp_path / "input.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path


def test_split_lines():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("") == []


class TestSubtitleShifter:
    """文件偏移测试类"""

    def test_shift_file(self, shifter, sample_file, tmp_path):
        output = tmp_path / "output.srt"

        shifted = shifter.shift_file(sample_file, output, -500)

        assert shifted == 2
        assert output.read_text(encoding="utf-8") == (
            "1\n"
            "00:00:00,500 --> 00:00:03,500\n"
            "Hello, world!\n"
            "\n"
            "2\n"
            "00:00:00,000 --> 00:00:00,500\n"
            "This is a test."
        )

    def test_crlf_input_is_normalized(self, shifter, tmp_path):
        source = tmp_path / "crlf.srt"
        source.write_bytes(b"1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n")
        output = tmp_path / "out.srt"

        shifter.shift_file(source, output, 1000)

        assert output.read_bytes() == b"1\n00:00:02,000 --> 00:00:03,000\nHi"

    def test_non_utf8_encoding(self, tmp_path):
        source = tmp_path / "latin.srt"
        source.write_text("00:00:01,000 --> 00:00:02,000\nCafé\n", encoding="latin-1")
        output = tmp_path / "out.srt"

        SubtitleShifter(encoding="latin-1").shift_file(source, output, 0)

        assert output.read_text(encoding="latin-1") == "00:00:01,000 --> 00:00:02,000\nCafé"

    def test_read_lines_wraps_decode_error(self, shifter, tmp_path):
        source = tmp_path / "bad.srt"
        source.write_bytes(b"Caf\xe9\n")

        with pytest.raises(SubtitleReadError) as exc_info:
            shifter.read_lines(source)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        assert exc_info.value.path == str(source)

    def test_unknown_encoding_is_read_error(self, sample_file, tmp_path):
        shifter = SubtitleShifter(encoding="no-such-codec")

        with pytest.raises(SubtitleReadError):
            shifter.read_lines(sample_file)
        assert shifter.run(sample_file, tmp_path / "out.srt", 0) == 1

    def test_refuses_in_place(self, shifter, sample_file):
        with pytest.raises(SameFileError):
            shifter.shift_file(sample_file, sample_file, 100)
        assert sample_file.read_text(encoding="utf-8") == SAMPLE_SRT

    def test_failure_writes_nothing(self, shifter, tmp_path):
        """出错时不生成输出文件"""
        source = tmp_path / "bad.srt"
        source.write_text("1\n00:00:01,000 --> 00:00:02,000\n2\n00:99:00,000 --> 00:99:01,000\n")
        output = tmp_path / "out.srt"

        with pytest.raises(RangeLineError):
            shifter.shift_file(source, output, 100)
        assert not output.exists()

    def test_run_returns_exit_codes(self, shifter, sample_file, tmp_path):
        assert shifter.run(sample_file, tmp_path / "ok.srt", 0) == 0
        assert shifter.run(tmp_path / "missing.srt", tmp_path / "never.srt", 0) == 1
        assert not (tmp_path / "never.srt").exists()


class TestCli:
    """命令行测试类"""

    def test_negative_offset_argument(self):
        args = build_parser().parse_args(["in.srt", "out.srt", "-500"])
        assert args.offset_ms == -500
        assert args.input_filepath == Path("in.srt")

    def test_main_success(self, sample_file, tmp_path):
        output = tmp_path / "out.srt"
        assert main([str(sample_file), str(output), "1000"]) == 0
        assert "00:00:02,000 --> 00:00:05,000" in output.read_text(encoding="utf-8")

    def test_main_default_offset(self, sample_file, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "default_offset_ms", 250)
        output = tmp_path / "out.srt"

        assert main([str(sample_file), str(output)]) == 0
        assert "00:00:01,250 --> 00:00:04,250" in output.read_text(encoding="utf-8")

    def test_main_reports_application_error(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.srt"), str(tmp_path / "out.srt"), "0"])

        captured = capsys.readouterr()
        assert code == 1
        assert "Application error" in captured.err
        assert "Application error" not in captured.out

    def test_main_undecodable_input(self, tmp_path, capsys):
        """非UTF-8字幕按读取失败处理"""
        source = tmp_path / "latin.srt"
        source.write_bytes(b"1\n00:00:01,000 --> 00:00:02,000\nCaf\xe9\n")
        output = tmp_path / "out.srt"

        assert main([str(source), str(output), "100"]) == 1
        assert "Application error" in capsys.readouterr().err
        assert not output.exists()

    def test_main_rejects_non_integer_offset(self, sample_file, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_file), str(tmp_path / "out.srt"), "1.5"])
        assert exc_info.value.code == 2
