#!/usr/bin/env python3
"""Wrapper script to run the movie ratings CLI."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from movieratings.cli import main
main()
