"""Prometheus metrics for EboBot.

Tracks turn outcomes and latency, outbound activities by kind, welcome
transitions, and state store commits.
"""

from prometheus_client import Counter, Histogram

TURNS = Counter(
    "ebobot_turns_total",
    "Total number of turns processed",
    labelnames=["activity_type", "outcome"],
)

TURN_LATENCY = Histogram(
    "ebobot_turn_latency_seconds",
    "Turn processing latency in seconds, including sends",
    labelnames=["activity_type"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

ACTIVITIES_SENT = Counter(
    "ebobot_activities_sent_total",
    "Outbound activities delivered",
    labelnames=["kind"],
)

WELCOMES = Counter(
    "ebobot_welcomes_total",
    "Conversations that went through the welcome transition",
)

STATE_COMMITS = Counter(
    "ebobot_state_commits_total",
    "State store commits",
    labelnames=["state", "outcome"],
)

ERRORS = Counter(
    "ebobot_errors_total",
    "Total number of errors",
    labelnames=["error_type"],
)
