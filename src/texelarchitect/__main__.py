"""
Run with: python -m texelarchitect
"""
import sys

from texelarchitect.main import main

sys.exit(main())
