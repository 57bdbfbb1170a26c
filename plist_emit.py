#!/usr/bin/env python3
"""未安装时直接运行：`python3 plist_emit.py -i Info.plist`。"""

import os
import sys

_SRC = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

# 作为包入口使用时指向 `src/plist_emit/`，`import plist_emit.cli` 等照常可用。
__path__ = [os.path.join(_SRC, "plist_emit")]


def main(argv: list[str] | None = None) -> int:
    from plist_emit.cli import main as _main

    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
