"""Test suite for the cardbridge relay.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - HTTP adapters run against httpx.MockTransport
   - The webhook server runs on aiohttp's test server

3. fakes/: Port implementations for testing
   - In-memory implementations of the driven ports
   - Used by core unit tests
"""
