"""Diagnostic sink adapters.

Provides the remote text log the relay reports its progress to.
"""
