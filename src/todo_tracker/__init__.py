"""todo-tracker: a personal task-tracking web application."""

__version__ = "1.0.0"
