"""
Task subsystem.

Components:
- task_models.py: data structures (Priority, Task, TaskDraft, TaskUpdate)
- errors.py: error hierarchy shared by the store and the file codec
- task_store.py: in-memory collection + validation, mutation and query helpers
- task_codec.py: line-oriented text file load/save
"""
