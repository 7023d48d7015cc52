"""EboBot: single-turn conversational activity handler.

Routes inbound Bot Framework activities to response behaviors and keeps
per-conversation welcome and turn-counter state.
"""

__version__ = "1.0.0"
