"""Ticket system adapters.

Implementations log in to the tracking system and create cards.
"""
