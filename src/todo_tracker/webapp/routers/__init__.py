"""
API routers for the todo-tracker web application.
"""
