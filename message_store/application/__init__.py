"""
Application layer.

Integrations that expose message stores to other frameworks.
"""
