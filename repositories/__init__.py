"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific table.
Repositories execute on a connection supplied by the caller, never commit,
and return domain model objects.
"""
