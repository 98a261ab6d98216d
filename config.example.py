# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPOOL_APP_NAME": "App display name (default: taskpool).",
    "TASKPOOL_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "TASKPOOL_DATA_DIR": "Local data directory for taskpool.log (default: .local/taskpool).",
    # Event transcript
    "TASKPOOL_RESULT_FILE": "Event transcript path (default: <data_dir>/result.txt).",
    "TASKPOOL_RESULT_FILE_ENABLED": "Write the event transcript (true/false, default: true).",
    # Scheduling
    "TASKPOOL_PROCESSING_SECONDS": "Fixed time a worker spends on one task (default: 10, may be 0).",
    "TASKPOOL_STARTING_TASK_ID": "First task id (default: 1001).",
    "TASKPOOL_STARTING_WORKER_ID": "First worker id (default: 1).",
    # Simulation
    "TASKPOOL_SIMULATION_STEP_SECONDS": "Pause between steps of `taskpool --simulate` (default: 1).",
}
