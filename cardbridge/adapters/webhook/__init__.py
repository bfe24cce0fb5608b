"""Webhook receiver adapters.

Provides the HTTP endpoint monitoring services deliver error events to.
"""
