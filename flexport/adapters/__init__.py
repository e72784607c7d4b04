# flexport/adapters/__init__.py

"""Adapters layer - concrete export formats"""
