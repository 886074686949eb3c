# src/taskmate/__init__.py

"""Text-command task manager with undo and JSON persistence."""

__version__ = "0.1.0"
