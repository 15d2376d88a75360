"""Centralized widget IDs to ensure consistency across the UI."""

PAGE_CONTENT = "page-content"          # Static showing the current page
PAGE_INDICATOR = "page-indicator"      # OverflowPagerIndicator under the page
PAGE_STATUS = "page-status"            # "Page x of y" line
