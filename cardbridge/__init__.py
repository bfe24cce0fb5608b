"""cardbridge - relays monitoring webhooks into ticket cards and chat notifications."""

__version__ = "0.1.0"
