"""todo-manager: a single-user task list kept in a local text file."""

__version__ = "0.1.0"
