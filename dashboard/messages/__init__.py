"""
Messages package for centralized text management.

- notifications.py: Notification ledger titles and bodies
- reports.py: Report export headers
"""

from dashboard.messages.notifications import NotificationMessages
from dashboard.messages.reports import ReportMessages

__all__ = [
    'NotificationMessages',
    'ReportMessages',
]
