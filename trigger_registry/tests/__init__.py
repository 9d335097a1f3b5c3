"""Test tools, factories, and pytest fixtures."""
from __future__ import annotations
