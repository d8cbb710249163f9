"""
MLS NEXT Schedule Calendar

Scrapes the MLS NEXT Academy Division schedule page for one club's matches
and publishes them as an iCalendar feed.

CLI Usage:
    python -m mlsnext_ics.main
    python -m mlsnext_ics.main --html saved_page.html --output docs/mlsnext.ics
"""

__version__ = "0.1.0"
