"""Scheduler adapters.

Runs relay workflows detached from the request that triggered them.
"""
