"""
File Queue Scanners

- directory.py - One full pass over the watched directory
"""

from domains.file_queue.scanners.directory import DirectoryScanner

__all__ = ["DirectoryScanner"]
