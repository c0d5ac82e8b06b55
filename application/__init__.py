"""
Application Layer for LiftLog.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Workflows coordinating domain logic and ports
- exceptions.py: Store and validation errors shared with infrastructure
"""
