"""
Notekeeper Backend - personal notes API

Accounts, login and per-user notes behind bearer-token authentication.
"""

__version__ = "1.0.0"
