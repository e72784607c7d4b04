# flexport/core/__init__.py

"""Core domain layer - pure data model with no I/O"""
