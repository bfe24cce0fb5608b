"""External adapters for the cardbridge relay.

This package contains all external dependencies (HTTP clients, the web
server, the asyncio task runner) and provides implementations of the
core port interfaces.

Adapter Organization:

- logsink/: Remote diagnostic sink (raw text over HTTP)
- ticketing/: Ticket system login and card creation (Zhiwei)
- notification/: Chat-bot delivery of created cards (Lark)
- scheduler/: Detached execution of relay workflows
- webhook/: HTTP server receiving monitoring webhooks
"""
