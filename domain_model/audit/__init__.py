"""Audit logging package."""

from domain_model.audit.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
