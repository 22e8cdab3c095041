"""CLI entry point for activitytext.config module.

Usage:
    python -m activitytext.config [options] TEXT

Example:
    python -m activitytext.config "group subgroup one"
    python -m activitytext.config --expand "group sub"
    python -m activitytext.config --history activities.txt -v "meeting"
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
