#!/usr/bin/env python
"""
crypton 主入口

使用方法:
    python main.py selftest
    python main.py password --length 8
    python main.py demo
"""

import sys

from crypton.cli import main


if __name__ == '__main__':
    sys.exit(main())
