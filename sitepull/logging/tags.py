# sitepull/logging/tags.py
"""
Logging subsystem tags.

Prefix log messages with these so output stays searchable per stage.
"""

PIPELINE = "[PIPELINE]"
OVERLAY = "[OVERLAY]"
TRANSFORM = "[TRANSFORM]"
PATHS = "[PATHS]"
SOURCE = "[SOURCE]"
WRITER = "[WRITER]"
CLI = "[CLI]"
