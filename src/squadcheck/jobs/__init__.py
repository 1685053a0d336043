"""Maintenance operations run on a schedule by the host application."""

from .autolock import AutoLockResult, auto_lock_players, started_rounds

__all__ = ["AutoLockResult", "auto_lock_players", "started_rounds"]
