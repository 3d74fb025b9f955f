"""
Party photo backend commons
Shared models, services and request plumbing for the party photo Lambda functions
"""

__version__ = "1.0.0"
