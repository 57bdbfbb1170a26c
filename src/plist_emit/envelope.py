"""
plist 文档外壳：XML 声明、DOCTYPE 与根 `<plist>` 元素。
"""

from __future__ import annotations

PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
    '<plist version="1.0">\n'
)
PLIST_FOOTER = "</plist>\n"


def wrap(contents: str) -> str:
    """为片段加上固定的文档头尾，片段本身不重新缩进。"""
    return PLIST_HEADER + contents + PLIST_FOOTER
