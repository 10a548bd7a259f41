# mutant_dna/logging/tags.py
"""Subsystem prefixes for log messages."""

DETECTOR = "[DETECTOR]"
SERVICE = "[SERVICE]"
STATS = "[STATS]"
STORAGE = "[STORAGE]"
CONFIG = "[CONFIG]"
API = "[API]"
CLI = "[CLI]"
