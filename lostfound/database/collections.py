"""
Lost & Found storage keys.

Each collection is persisted as one complete JSON snapshot under a fixed key.
"""

# ─────────────────────────────────────────────────────────────────
# Collection snapshots
# ─────────────────────────────────────────────────────────────────

USERS_KEY = "lostFoundUsers"
ITEMS_KEY = "lostFoundItems"
NOTIFICATIONS_KEY = "lostFoundNotifications"

# ─────────────────────────────────────────────────────────────────
# Single-record slots
# ─────────────────────────────────────────────────────────────────

SESSION_KEY = "currentUser"
