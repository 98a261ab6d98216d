"""
Task subsystem (the scheduling core).

Components:
- task_models.py: data structures (Task, TaskPriority, TaskStatus, WorkerStatus, SchedulerStatus)
- task_queue.py: two-class FIFO priority queue of pending tasks
- worker.py: single-task worker state machine with a cancellable timer
- task_scheduler.py: worker pool + queue + assignment pass + preemption
- task_api.py: small high-level helpers used by connectors
"""
