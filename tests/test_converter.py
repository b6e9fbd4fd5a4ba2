"""End-to-end conversion tests."""

from datetime import date

import pytest
from txt2asc.config import ConverterConfig
from txt2asc.converter import convert
from txt2asc.exceptions import ConversionError
from txt2asc.parser.tokens import TokenTable


BASE_DATE = date(2024, 1, 15)


def test_sample_line_converts() -> None:
    content = "1 接收 16:52:49.159.0 0x1A8 数据帧 标准帧 8 13 50 c3 10 27 02 26 b0"
    
    result = convert(content, BASE_DATE)
    
    assert result.frame_count == 1
    assert result.asc == "\n".join([
        "date Mon Jan 15 16:52:49 2024",
        "base hex timestamps absolute",
        "internal events logged",
        "// version 11.0.0",
        "",
        "0.000000 1 1a8 Rx d 8 13 50 c3 10 27 02 26 b0",
    ])


def test_capture_with_headers(capture_text: str) -> None:
    result = convert(capture_text, BASE_DATE)
    body = result.asc.split("\n")[5:]
    
    assert result.frame_count == 3
    assert body == [
        "0.000000 1 1a8 Rx d 8 13 50 c3 10 27 02 26 b0",
        "0.003007 1 0c01d0e8x Rx d 8 13 50 c3 10 27 02 26 b0",
        "0.041000 1 123 Tx r 0 ",
    ]
    assert result.diagnostics.header_lines == 2


def test_header_lines_do_not_latch_start() -> None:
    content = "序号 方向 时间 帧ID\nText: 12:00:00\n"
    
    result = convert(content, BASE_DATE)
    
    assert result.frame_count == 0
    assert result.asc.split("\n")[0] == "date Mon Jan 15 00:00:00 2024"


def test_no_valid_lines() -> None:
    result = convert("nothing to see\n\n  \n", BASE_DATE)
    
    assert result.frame_count == 0
    assert len(result.asc.split("\n")) == 5
    assert result.asc.endswith("// version 11.0.0\n")
    assert result.asc.startswith("date Mon Jan 15 00:00:00 2024\n")
    assert result.input_preview == "nothing to see"


def test_empty_content() -> None:
    result = convert("", BASE_DATE)
    
    assert result.frame_count == 0
    assert result.input_preview == ""
    assert result.output_preview == result.asc


def test_output_preview_truncated(long_capture_text: str) -> None:
    result = convert(long_capture_text, BASE_DATE)
    preview = result.output_preview.split("\n")
    full = result.asc.split("\n")
    
    assert result.frame_count == 8
    assert len(full) == 5 + 8
    assert preview == full[:10] + ["..."]
    assert full[-1] == "0.070000 1 100 Rx d 1 07"


def test_input_preview_first_five_lines(long_capture_text: str) -> None:
    result = convert(long_capture_text, BASE_DATE)
    
    assert result.input_preview.split("\n") == long_capture_text.split("\n")[:5]


def test_preview_lines_configurable(long_capture_text: str) -> None:
    result = convert(long_capture_text, BASE_DATE, ConverterConfig(preview_lines=2))
    
    assert len(result.input_preview.split("\n")) == 2
    assert result.output_preview.split("\n")[-1] == "..."
    assert len(result.output_preview.split("\n")) == 5 + 2 + 1


def test_custom_tokens_through_config() -> None:
    config = ConverterConfig(tokens=TokenTable.from_dict({
        "header_prefixes": ["Index"],
        "direction": {"Receive": "Rx"},
    }))
    content = "Index Dir Time\n1 Receive 08:00:00.5 0x7df Data Standard 2 02 01"
    
    result = convert(content, BASE_DATE, config)
    
    assert result.frame_count == 1
    assert result.asc.split("\n")[-1] == "0.000000 1 7df Rx d 2 02 01"


def test_calls_are_independent(capture_text: str) -> None:
    first = convert(capture_text, BASE_DATE)
    second = convert("1 接收 01:00:00 0x1 数据帧 标准帧 0", BASE_DATE)
    third = convert(capture_text, BASE_DATE)
    
    assert second.asc.split("\n")[0] == "date Mon Jan 15 01:00:00 2024"
    assert first.asc == third.asc


@pytest.mark.parametrize("content", [b"1 2 3", None, 42])
def test_non_text_content_rejected(content: object) -> None:
    with pytest.raises(ConversionError, match="must be text"):
        convert(content, BASE_DATE)  # type: ignore[arg-type]


def test_bad_base_date_rejected() -> None:
    with pytest.raises(ConversionError, match="Base date"):
        convert("", "2024-01-15")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "content,base_date,date_line",
    [
        (
            "1 接收 99999999:00:00.0.0 0x1A8 数据帧 标准帧 8 13 50 c3 10 27 02 26 b0",
            date(2024, 1, 15),
            "date Mon Jan 15 15:00:00 2024",
        ),
        (
            "1 接收 -1:00:00.0.0 0x1A8 数据帧 标准帧 0",
            date(1, 1, 1),
            "date Mon Jan 1 23:00:00 1",
        ),
    ],
)
def test_out_of_range_start_time_still_converts(content: str, base_date: date, date_line: str) -> None:
    """Test a wild timestamp on the first frame does not abort the call."""
    result = convert(content, base_date)
    
    assert result.frame_count == 1
    assert result.asc.split("\n")[0] == date_line
    assert result.asc.split("\n")[5].startswith("0.000000 1 1a8 Rx d ")
