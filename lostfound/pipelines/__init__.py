"""
Pipelines package.

Stateless orchestration of one user action each: call the services, fire
the render hooks, build the response dict.
"""

from lostfound.pipelines.auth import register_pipeline, login_pipeline, logout_pipeline
from lostfound.pipelines.claims import create_claim_pipeline
from lostfound.pipelines.notifications import (
    my_notifications_pipeline,
    badge_count_pipeline,
    mark_notification_seen_pipeline,
    mark_all_notifications_seen_pipeline,
    dismiss_notification_pipeline,
)
from lostfound.pipelines.reports import (
    submit_report_pipeline,
    mark_claimed_pipeline,
    browse_pipeline,
    my_reports_pipeline,
)

__all__ = [
    "register_pipeline",
    "login_pipeline",
    "logout_pipeline",
    "create_claim_pipeline",
    "my_notifications_pipeline",
    "badge_count_pipeline",
    "mark_notification_seen_pipeline",
    "mark_all_notifications_seen_pipeline",
    "dismiss_notification_pipeline",
    "submit_report_pipeline",
    "mark_claimed_pipeline",
    "browse_pipeline",
    "my_reports_pipeline",
]
