# flexport/shared/__init__.py

"""Shared utilities and mixins"""
