# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Remote task service
    "TASKBOARD_API_BASE_URL": "Base URL of the REST service exposing /api/tasks (default: http://localhost:5000).",
    "TASKBOARD_API_TIMEOUT_SECONDS": "Per-request timeout in seconds; 0 or empty disables it (default: 0).",
    # Store behaviour
    "TASKBOARD_SEQUENCE_MUTATIONS": (
        "Drop delete/update responses superseded by a newer request for the same task (default: false)."
    ),
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory holding taskboard.log (default: .local/taskboard).",
}
