# flexport/infrastructure/__init__.py

"""Infrastructure layer - configuration and logging"""
