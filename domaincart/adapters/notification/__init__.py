"""Notification adapters for reporting operation outcomes to the user.

Implementations support multiple output channels:
- Stdout (terminal pretty-print)
"""
