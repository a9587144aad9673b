"""
Application Layer for the Overload Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Session resolution, session commit and statistics workflows
- exceptions.py: Errors shared with the infrastructure layer
"""
