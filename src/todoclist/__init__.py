"""
todoclist: a small file-backed todo list driven from the command line.

Every invocation loads the whole list from one JSON file, applies at most one
change and writes the list back.
"""

__version__ = "0.1.0"
