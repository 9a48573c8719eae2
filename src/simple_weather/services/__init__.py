"""
Shared service utilities.

- http.py - Pre-configured requests session (default timeout, no retries)
"""
