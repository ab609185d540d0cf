"""
Git Search - Commit and File Content Search

Searches commit messages and tracked files of a git repository by
delegating to the git command-line tool.
"""

__version__ = "0.1.0"
