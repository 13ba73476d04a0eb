"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskList) and JSON (de)serialization
- task_store.py: file-backed init/load/save of a TaskList
- errors.py: user-facing error kinds
"""
