#!/usr/bin/env python3
# Keys: q/Esc/Ctrl+C quit  Tab/Shift+Tab focus  ←/→ or [/] font  m mode  a hue cycle  +/- speed

import sys

from .app import run_app


def main() -> int:
    try:
        return run_app()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
