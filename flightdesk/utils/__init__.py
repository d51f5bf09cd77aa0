"""
Shared utilities for flightdesk.
"""
