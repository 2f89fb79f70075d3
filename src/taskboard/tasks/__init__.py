"""
Task subsystem.

Components:
- task_models.py: data structures (Task, StoreStatus, StoreState)
- datetime_combiner.py: date+time merging, wire parsing and display formatting
- categorizer.py: Today / Upcoming / Completed partitioning
- task_store.py: confirm-then-apply store synchronised with the remote service
- task_api.py: add-form submission and id lookup helpers used by the UI
- errors.py: ValidationError / RemoteFailure and user-facing messages
"""
