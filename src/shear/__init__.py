"""Delete stale remote branches.

Features:
- Find remote branches already merged into a reference branch
- Never touch origin/develop or origin/master
- Limit the number of branches deleted per run
- Dry-run mode to preview deletions
- Print-only mode that just lists the delete commands
"""

__version__ = "0.1.0"
