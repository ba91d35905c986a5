"""
Elevator worker tests

Tests for the per-elevator side of the fleet:
- Elevator state queries and snapshots
- Sweep decisions, one tick at a time
- Command channel and state lock
- Threaded worker lifecycle
"""
