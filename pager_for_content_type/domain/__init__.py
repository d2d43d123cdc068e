"""
Domain Layer

Contains the pager settings entities, value objects and the repository
interfaces the application layer depends on.
"""
