"""
Core plumbing shared by the CLI.

Components:
- paths.py: resolves the absolute location of the task-list file
- state.py: AppState handed to every command handler
"""
