"""
Application Layer

Contains the pager settings service, the submission DTOs and the settings
form that ties them to a form host.
"""
