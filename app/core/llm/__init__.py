"""LLM integration layer.

This package is intentionally small:
- No prompt/output logging.
- Configurable via environment variables.
- One outbound call per request, no retries, no streaming.
"""
