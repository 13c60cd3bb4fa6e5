"""Configuration management."""

import os


# Front-end Configuration
LOG_LEVEL = os.getenv("STREAMLOG_LEVEL", "info")
LOG_STREAM = os.getenv("STREAMLOG_STREAM", "stdout")
LOG_NAME = os.getenv("STREAMLOG_NAME", "streamlog")
