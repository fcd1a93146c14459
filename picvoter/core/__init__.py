"""
Core domain layer: exceptions, scoring policy, identifiers.

Dependencies: python-ulid
System role: Framework-free domain logic shared by the store and its callers
"""
