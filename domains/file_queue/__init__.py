"""
File Queue Domain

Turns a directory into a work queue:
- Files dropped into the watched directory are matched against a glob pattern
- Each match is handed to an external command as its last argument
- The command's exit status decides whether the file is moved to the
  processed queue, the error queue, or deleted

Scans always re-read the directory, so the directory contents are the only
state the daemon keeps.
"""

__all__ = ["models", "processors", "scanners", "watchers"]
