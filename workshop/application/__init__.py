"""
Application layer - use cases, configuration and the contracts that
infrastructure adapters implement.
"""
