"""Taskboard API: projects, tasks and AI insights."""

__version__ = "1.0.0"
