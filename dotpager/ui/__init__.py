"""Textual UI components for dotpager.

- Dot and OverflowPagerIndicator widgets
- PagerApp, a small app that pages through text with an indicator below it
"""
