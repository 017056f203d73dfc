"""
jsongrep - filter and sort JSON lines with declarative query/sort documents.
"""

__version__ = "0.1.0"
