"""Shared test configuration."""

import os
import sys

# Make the hand-written fakes importable from every test directory.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "fakes"))
