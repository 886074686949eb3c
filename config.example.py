# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name the assistant greets you with (default: taskmate).",
    "TASKMATE_LOG_LEVEL": "Log file level (default: INFO).",
    "TASKMATE_LOG_DIR": "Directory for taskmate.log (default: <data_dir>).",
    # Console
    "TASKMATE_CONSOLE_ENABLED": "Run the interactive console (true/false).",
    "TASKMATE_SHOW_TIMESTAMPS": "Prefix replies with the local time (true/false).",
    # Paths (gitignored)
    "TASKMATE_DATA_DIR": "Local data directory (default: .local/taskmate).",
    "TASKMATE_TASKS_PATH": "Tasks JSON file (default: <data_dir>/tasks.json).",
    # Undo
    "TASKMATE_UNDO_DEPTH": "How many changes can be undone in one session (default: 20, min 1).",
}
