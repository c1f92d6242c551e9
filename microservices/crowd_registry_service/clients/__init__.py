"""
Crowd Registry Service Clients

Adapters for external collaborators.
"""

from .computation_runtime import LocalComputationRuntime, SubmittedRequest

__all__ = ["LocalComputationRuntime", "SubmittedRequest"]
