"""
hoopreplay CLI - play-by-play transcript replay

Commands:
- hoopreplay parse - Parse a transcript into events
- hoopreplay replay - Replay events into a box score
- hoopreplay version - Show version information
"""

__version__ = "0.1.0"
