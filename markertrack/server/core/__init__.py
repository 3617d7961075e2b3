"""
Server core: configuration, constants and token security.
"""
