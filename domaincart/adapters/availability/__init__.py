"""Availability adapters for checking whether a domain can be registered.

Implementations:
- RDAP (registration data over HTTP via rdap.org or a registry server)
- Static (fixed list of taken domains, for demos and offline use)
"""
