from .todo_requests import CreateTodoRequest, UpdateTodoRequest, DeleteTodoRequest

__all__ = ["CreateTodoRequest", "UpdateTodoRequest", "DeleteTodoRequest"]
