"""
Application common module.

- dispatch_events: hand domain events of a saved aggregate to the event log
"""

from .events import dispatch_events

__all__ = ["dispatch_events"]
