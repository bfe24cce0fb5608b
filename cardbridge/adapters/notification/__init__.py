"""Notification adapters for announcing created cards.

Implementations support chat-bot webhooks (Lark).
"""
