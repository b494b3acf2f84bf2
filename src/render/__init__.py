"""Source rendering package.

This module assembles the highlighting pipeline and runs it over
embedded demo text or source files read from disk.
"""
