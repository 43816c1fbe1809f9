"""
Test suite for the replay engine.

Focus areas:
- Transcript parsing and tolerance of malformed rows
- Reducer handlers and team/player consistency
- Playing-time accrual
- Replay determinism
"""
