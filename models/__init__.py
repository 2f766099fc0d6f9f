"""
models/ - Domain Models
=======================
Dataclasses for the documents stored in MongoDB, together with the
pre-save validation and normalization each document runs before a write.
"""
