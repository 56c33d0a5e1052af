"""Shared utilities for Satellite Watcher."""
