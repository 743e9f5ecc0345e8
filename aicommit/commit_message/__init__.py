"""Commit message generation package."""

from .cleaner import clean_completion
from .generator import REQUEST_TIMEOUT, CommitMessageGenerator

__all__ = [
    'CommitMessageGenerator',
    'REQUEST_TIMEOUT',
    'clean_completion',
]
