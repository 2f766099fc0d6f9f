"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all MongoDB queries for a specific collection.
Repositories run the model's pre-save checks before every write and return
domain model objects.
"""
