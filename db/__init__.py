"""
db/ - Database Layer
====================
Handles the MongoDB connection cache and index setup.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
