"""
File Queue Processors

Per-file steps run by the directory scanner:
- matcher.py - Glob pattern eligibility
- command.py - External command invocation and outcome classification
- disposer.py - Move or delete after the outcome is known
"""

from domains.file_queue.processors.command import CommandRunner
from domains.file_queue.processors.disposer import Disposer
from domains.file_queue.processors.matcher import PatternMatcher

__all__ = ["CommandRunner", "Disposer", "PatternMatcher"]
