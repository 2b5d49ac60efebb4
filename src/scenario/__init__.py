"""Scenario context, step registry and a minimal scenario runner."""
