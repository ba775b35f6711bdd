"""
Adapters: cache backends, HTTP transport and provider integrations.
"""
