# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets (the Matrix password); keep them in .env (gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "LANIA_APP_NAME": "Name the assistant uses for itself (default: Lania).",
    "LANIA_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Front ends
    "LANIA_CONSOLE_ENABLED": "Run the console loop (true/false, default: true).",
    "LANIA_MATRIX_ENABLED": "Run the Matrix room bot (true/false, default: false).",
    # Matrix
    "LANIA_MATRIX_HOMESERVER": "Matrix homeserver URL.",
    "LANIA_MATRIX_USER_ID": "Matrix user ID (bot).",
    "LANIA_MATRIX_PASSWORD": "Password for first login (session stored locally).",
    "LANIA_MATRIX_ROOMS": "Optional allowlist of room IDs (empty => all rooms).",
    # Paths (gitignored)
    "LANIA_DATA_DIR": "Local data directory (default: data).",
    "LANIA_TASKS_PATH": "Task file (default: <data_dir>/lania.txt).",
    "LANIA_LOG_DIR": "Directory for lania.log (default: <data_dir>).",
    "LANIA_MATRIX_STORE_PATH": "Matrix session store (default: <data_dir>/matrix_store).",
}
