"""Shared helper utilities."""

from .urls import fix_prefix, get_host_name

__all__ = ["fix_prefix", "get_host_name"]
