"""
Enum definitions for the application.

These enums are used across models and provide type-safe role/state values.
"""

from enum import Enum


class MessageRole(str, Enum):
    """Author of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class PipelineState(str, Enum):
    """
    State of a single send run.

    IDLE -> SUBMITTING -> AWAITING_GENERATION -> MERGING -> IDLE
    IDLE -> SUBMITTING -> FAILED -> IDLE
    """

    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    AWAITING_GENERATION = "AWAITING_GENERATION"
    MERGING = "MERGING"
    FAILED = "FAILED"


class SendStatus(str, Enum):
    """Final result of a send run."""

    COMPLETED = "COMPLETED"
    GENERATION_FAILED = "GENERATION_FAILED"
    SUBMIT_FAILED = "SUBMIT_FAILED"
    REJECTED = "REJECTED"  # no session selected or empty input
    BUSY = "BUSY"  # another send is in flight for the session
