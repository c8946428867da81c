"""
Configuration settings for Document File Service
"""

# Service Configuration
SERVICE_NAME = "Document File Service"
SERVICE_VERSION = "1.0.0"
HOST = "0.0.0.0"
PORT = 9000

# File size limits (in bytes)
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB

# Outbound HEAD request timeout (in seconds)
HEAD_REQUEST_TIMEOUT = 10.0
