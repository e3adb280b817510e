"""
Service helpers for the audit API (request telemetry).
"""
from .telemetry import get_request_id, log_event, set_request_id, timed_event

__all__ = ['get_request_id', 'log_event', 'set_request_id', 'timed_event']
