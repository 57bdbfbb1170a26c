"""`python -m plist_emit`：与 `plist-emit` 命令相同的入口。"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
