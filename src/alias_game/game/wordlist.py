"""
词表读取

把用户上传的文本文件解析为词语列表：每行一个词，空行丢弃。
除去空行外不做任何规范化。
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union


def parse_word_list(content: str) -> List[str]:
    return [line.rstrip("\r") for line in content.split("\n") if line.strip()]


def read_word_file(path: Union[str, Path]) -> List[str]:
    """读取 UTF-8 文本词表。

    Raises:
        FileNotFoundError: 文件不存在。
        OSError: 文件无法读取。
        UnicodeDecodeError: 文件不是 UTF-8 编码。
    """
    p = Path(path)
    with open(p, "r", encoding="utf-8-sig") as f:
        return parse_word_list(f.read())
