"""
Data transfer objects for the todo API.
"""
