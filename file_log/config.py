"""Configuration management."""

import os


# Log file Configuration
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "app.log")
LOG_ENCODING = os.getenv("LOG_ENCODING", "utf-8")

# Logger Configuration
LOG_LABEL = os.getenv("LOG_LABEL", "app")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
