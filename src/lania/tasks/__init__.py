"""
Task subsystem.

Components:
- task_models.py: Task and TaskKind, date parsing/formatting
- task_list.py: ordered, 1-based task collection
- task_codec.py: line format of the task file
- task_store.py: plain-text file store + load/save through the codec
"""
