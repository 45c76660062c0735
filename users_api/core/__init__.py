"""
Core
====

Cross-cutting building blocks: settings, logging setup and error handlers.
"""
