"""
Report pipeline functions.

Stateless orchestration logic for submitting and browsing reports.
"""

import datetime as dt
import logging
from typing import Optional, Dict, Any, Union

from common.utils import success_response, list_response
from lostfound.events import RenderEvent, RenderHooks
from lostfound.schemas import ItemType, coerce_enum, require_text
from lostfound.services.auth.session_controller import SessionController
from lostfound.services.items.item_registry import ItemRegistry
from lostfound.services.matching.matcher import Matcher
from lostfound.services.media.image_reader import ImageReader, ImageSource

logger = logging.getLogger(__name__)


async def submit_report_pipeline(
    session_controller: SessionController,
    image_reader: ImageReader,
    item_registry: ItemRegistry,
    matcher: Matcher,
    render_hooks: RenderHooks,
    item_type: Union[ItemType, str],
    name: str,
    location: str,
    description: Optional[str] = None,
    date: Union[dt.date, str, None] = None,
    image: Optional[ImageSource] = None,
) -> Dict[str, Any]:
    """
    Orchestrates a lost/found report submission.

    The image is read before the item exists, so the item is stored (and
    seen by the matcher) with its image already resolved.

    Args:
        session_controller: For the reporting user
        image_reader: Resolves the optional photo
        item_registry: For persistence
        matcher: Looks for a similar opposite-type report
        render_hooks: UI refresh triggers
        item_type: lost | found
        name: What the item is
        location: Where it was lost/found
        description: Optional free text
        date: ISO date; today when missing
        image: Optional photo path or open file

    Returns:
        Response dict with the item, the match notification (if any) and message

    Raises:
        UnauthorizedException: Nobody is logged in
        ValidationException: Invalid type, blank name/location or bad date
    """
    reporter = session_controller.require_user()

    item_type = coerce_enum(ItemType, item_type, "type")
    require_text(name, "name")
    require_text(location, "location")
    if date is None or (isinstance(date, str) and not date.strip()):
        date = dt.date.today()

    image_data = await image_reader.read_as_data_url(image)

    item = item_registry.submit_item(
        item_type=item_type,
        name=name,
        location=location,
        description=description,
        date=date,
        reporter=reporter,
        image=image_data,
    )
    match = matcher.find_and_notify(item)

    render_hooks.fire(RenderEvent.BROWSE_CHANGED, RenderEvent.MY_REPORTS_CHANGED)
    if match is not None:
        render_hooks.fire(RenderEvent.NOTIFICATIONS_CHANGED, RenderEvent.BADGE_CHANGED)

    return success_response(
        {
            "item": item,
            "matchDetected": match is not None,
            "matchNotification": match,
        },
        message=f"{item.type.value.capitalize()} item reported successfully.",
    )


def mark_claimed_pipeline(
    session_controller: SessionController,
    item_registry: ItemRegistry,
    render_hooks: RenderHooks,
    item_id: int,
) -> Dict[str, Any]:
    """
    Finalize an item as claimed.

    Raises:
        NotFoundException: Unknown item
        ForbiddenException: Not the reporter and not an admin
    """
    item = item_registry.mark_claimed(item_id, session_controller.current_user)

    render_hooks.fire(RenderEvent.BROWSE_CHANGED, RenderEvent.MY_REPORTS_CHANGED)
    return success_response(item, message="Item marked as claimed.")


def browse_pipeline(
    item_registry: ItemRegistry,
    filter_status: Optional[str] = None,
    search_text: Optional[str] = None,
) -> Dict[str, Any]:
    """Browse all reports, most recent first."""
    items = item_registry.query(filter_status=filter_status, search_text=search_text)
    return list_response(items)


def my_reports_pipeline(
    session_controller: SessionController,
    item_registry: ItemRegistry,
) -> Dict[str, Any]:
    """Reports of the current user; empty without a session."""
    user = session_controller.current_user
    items = item_registry.items_by_owner(user.id) if user else []
    return list_response(items)
