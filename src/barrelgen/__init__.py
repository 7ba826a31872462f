"""
barrelgen - generate barrel files that re-export every source file in a directory.
"""

__version__ = "0.1.0"
