"""UserTask API: user accounts and personal to-do tasks."""

__version__ = "1.0.0"
