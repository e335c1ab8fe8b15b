# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing is secret here; .env is just a convenience for local runs.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name, used as the console prompt (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/todo.log (true/false, default: true).",
    # Frontend
    "TODO_CONSOLE_ENABLED": "Run the interactive console; false runs the demo instead (default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local directory for log files (default: .local/todo).",
}
