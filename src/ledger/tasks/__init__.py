"""
Task subsystem.

Components:
- task_models.py: Task record and its JSON line codec
- task_ids.py: random task id generator
- task_store.py: line-delimited JSON file storage
- task_match.py: id prefix resolution
- task_render.py: column-aligned text output helpers
- task_api.py: ledger operations (add/list/close/remove/report/dump)
"""
