"""Duewise package initializer.

Bills, transactions and Web Push due-date reminders for a personal finance
tracker.
"""

__version__ = "0.1.0"
