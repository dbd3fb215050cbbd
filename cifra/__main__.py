#!/usr/bin/env python3
"""
Cifra entry point for running as a module: python3 -m cifra
"""

import sys
from cifra.cli import main

if __name__ == '__main__':
    sys.exit(main())
