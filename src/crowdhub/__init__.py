"""CrowdHub - RBAC permission service for the CrowdHub portal."""

__version__ = "0.1.0"
