"""
Standard response helpers.

Every pipeline hands the UI layer a plain dict: `success` plus either `data`
or `error`. Records are converted with their `to_snapshot()` method, so the
UI sees the same camelCase field names as the stored snapshots.

Example:
    from common.utils import success_response

    try:
        item = registry.mark_claimed(item_id, user)
    except LostFoundError as exc:
        return exc.to_dict()
    return success_response(item, message="Item marked as claimed.")
"""

from typing import Any, Iterable, Optional, Dict


def to_payload(value: Any) -> Any:
    """Convert records (and lists/dicts of records) to snapshot dicts."""
    if hasattr(value, "to_snapshot"):
        return value.to_snapshot()
    if isinstance(value, dict):
        return {key: to_payload(v) for key, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(v) for v in value]
    return value


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a success payload.

    Args:
        data: Record, list of records, or any JSON-friendly value
        message: Alert text for the UI

    Returns:
        {"success": True} plus `data`/`message` when given
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = to_payload(data)

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Build an error payload.

    Args:
        message: Text shown to the user
        code: Stable error code, e.g. "ITEM_NOT_FOUND"
        details: Extra context such as the offending field
        errors: Individual problems, e.g. failed secret rules
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    if errors:
        error["errors"] = errors

    return {"success": False, "error": error}


def list_response(
    records: Iterable[Any],
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a success payload for a list view, with its `count`."""
    data = [to_payload(record) for record in records]
    response: Dict[str, Any] = {
        "success": True,
        "data": data,
        "count": len(data),
    }

    if message:
        response["message"] = message

    return response
