"""Workspace state engine: reducer, active-device cache and inspector geometry."""
