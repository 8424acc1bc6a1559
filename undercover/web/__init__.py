"""
Web interface module for single-device play.
"""

from .event_emitter import EventEmitter

__all__ = ['EventEmitter']
