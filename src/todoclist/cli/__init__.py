"""
Command-line front-end.

Components:
- main.py: argparse entrypoint
- bootstrap.py: builds AppState from settings and global flags
- commands.py: command registry and subcommand handlers
- render.py: rich text helpers for console output
"""
