"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Configuration management
- Database models and sessions
- Configuration store and content type registry implementations
- Logging infrastructure
"""
