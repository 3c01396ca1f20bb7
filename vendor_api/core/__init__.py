"""Cross-cutting concerns: settings, exceptions, security, response envelopes."""
