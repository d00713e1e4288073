#!/usr/bin/env python3
"""
KeyCalc main entry point for running as a module: python3 -m keycalc
"""

import sys
from keycalc.cli import main

if __name__ == '__main__':
    sys.exit(main())
