"""
带缩进跟踪的文本累加器。

每次追加的片段都会按当前层级补上缩进；已经以缩进单位开头的片段视为
嵌套调用产出的成品，不再重复缩进。
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager

# 行首位置，但不包括结尾换行之后的空位置。
_LINE_START_RE = re.compile(r"^(?!\Z)", re.MULTILINE)


class IndentedText:
    """按层级缩进累加输出文本，归属于单次编码调用。"""

    def __init__(self, indent: str = "\t") -> None:
        self.indent = indent
        self.level = 0
        self._parts: list[str] = []

    def __str__(self) -> str:
        return self.text()

    def text(self) -> str:
        return "".join(self._parts)

    def raise_indent(self) -> None:
        self.level += 1

    def lower_indent(self) -> None:
        if self.level > 0:
            self.level -= 1

    def append(self, fragment: str | list[str], *, reindent: bool = True) -> None:
        """
        追加一行或多行文本。

        - 传入列表时逐个追加。
        - `reindent=False` 时只缩进首行，续行原样保留（用于多行标量内容）。
        - 片段末尾缺少换行时补一个，已有则不重复。
        """
        if isinstance(fragment, list):
            for item in fragment:
                self.append(item, reindent=reindent)
            return

        prefix = self.indent * self.level
        if not prefix or (self.indent and fragment.startswith(self.indent)):
            self._parts.append(fragment)
        elif reindent:
            self._parts.append(_LINE_START_RE.sub(lambda _m: prefix, fragment))
        else:
            self._parts.append(prefix + fragment)

        if not fragment.endswith("\n"):
            self._parts.append("\n")

    @contextmanager
    def block(self, name: str) -> Iterator[IndentedText]:
        """输出 `<name>` 与 `</name>`，中间内容缩进一级。"""
        self.append(f"<{name}>")
        self.raise_indent()
        try:
            yield self
        finally:
            self.lower_indent()
        self.append(f"</{name}>")
