"""
Task subsystem.

Components:
- task_models.py: data structures (DeletionTask, TaskStatus, TaskOutcome)
- task_store.py: JSON document storage with atomic replace
- reconciler.py: startup pass that expires overdue tasks
- task_scheduler.py: one asyncio waiter per pending deletion
- outcomes.py: lock-guarded collector of waiter results
- shutdown.py: merges results and performs the final save
- task_api.py: ingestion of new requests and the startup summary
"""
