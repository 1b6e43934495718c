"""Viewdeck - multi-device web page previewer workspace core."""
