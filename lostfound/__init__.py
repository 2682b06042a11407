"""
Lost & Found registry.

Users report lost and found items, get notified about likely matches and
send claim requests to the reporter.
"""

__version__ = "1.0.0"
