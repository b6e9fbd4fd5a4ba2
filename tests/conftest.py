"""Shared capture fixtures."""

import pytest


HEADER = "序号 方向 时间 帧ID 帧格式 帧类型 长度 数据"

ROWS = [
    "1 接收 16:52:49.159.0 0x1A8 数据帧 标准帧 8 13 50 c3 10 27 02 26 b0",
    "2 接收 16:52:49.162.7 0x0C01D0E8 数据帧 扩展帧 8 13 50 c3 10 27 02 26 b0",
    "3 发送 16:52:49.200.0 0x123 远程帧 标准帧 0",
]


@pytest.fixture
def capture_text() -> str:
    """A small capture export with a header, a blank line and three frames."""
    return "\r\n".join(["Text: exported by CAN tool", HEADER, "", *ROWS, ""])


@pytest.fixture
def long_capture_text() -> str:
    """Eight frames, one every 10 ms."""
    lines = [HEADER]
    for i in range(8):
        lines.append(f"{i + 1} 接收 10:00:00.{i * 10}.0 0x100 数据帧 标准帧 1 {i:02x}")
    return "\n".join(lines)
