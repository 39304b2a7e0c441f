"""
db/ - Database Layer
====================
Handles PostgreSQL connection pools, transaction scopes and schema migrations.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
