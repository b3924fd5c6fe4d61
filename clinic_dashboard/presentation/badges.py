# Badge lookups for status/type/priority values shown across the dashboard.
# Every lookup is total: anything unrecognised renders as a neutral "Unknown" badge.
from typing import Dict, NamedTuple, Optional


class Badge(NamedTuple):
    label: str
    color_class: str


BLUE = "bg-blue-100 text-blue-800 dark:bg-blue-900 dark:text-blue-200"
GREEN = "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-200"
EMERALD = "bg-emerald-100 text-emerald-800 dark:bg-emerald-900 dark:text-emerald-200"
RED = "bg-red-100 text-red-800 dark:bg-red-900 dark:text-red-200"
YELLOW = "bg-yellow-100 text-yellow-800 dark:bg-yellow-900 dark:text-yellow-200"
ORANGE = "bg-orange-100 text-orange-800 dark:bg-orange-900 dark:text-orange-200"
GRAY = "bg-gray-100 text-gray-800 dark:bg-gray-900 dark:text-gray-200"


def _outline(color: str) -> str:
    return f"text-{color}-600 border-{color}-600"


NEUTRAL = Badge("Unknown", GRAY)
NEUTRAL_OUTLINE = Badge("Unknown", "border-gray-300 text-gray-600")

# personnel pages (doctors, staff) share the same status vocabulary
PERSONNEL_STATUS = {
    "active": Badge("Active", GREEN),
    "on-leave": Badge("On Leave", YELLOW),
    "inactive": Badge("Inactive", RED),
}

STATUS_BADGES: Dict[str, Dict[str, Badge]] = {
    "appointments": {
        "scheduled": Badge("Scheduled", BLUE),
        "confirmed": Badge("Confirmed", GREEN),
        "in-progress": Badge("In Progress", ORANGE),
        "checked-in": Badge("Checked In", EMERALD),
        "completed": Badge("Completed", EMERALD),
        "cancelled": Badge("Cancelled", RED),
        "no-show": Badge("No Show", YELLOW),
    },
    "patients": {
        "active": Badge("Active", GREEN),
        "inactive": Badge("Inactive", GRAY),
        "pending": Badge("Pending", YELLOW),
    },
    "doctors": PERSONNEL_STATUS,
    "staff": PERSONNEL_STATUS,
    "rooms": {
        "available": Badge("Available", GREEN),
        "occupied": Badge("Occupied", BLUE),
        "maintenance": Badge("Maintenance", RED),
    },
    "messages": {
        "unread": Badge("Unread", BLUE),
        "read": Badge("Read", GRAY),
        "replied": Badge("Replied", GREEN),
        "archived": Badge("Archived", YELLOW),
    },
    "lab-results": {
        "completed": Badge("Completed", GREEN),
        "abnormal": Badge("Abnormal", YELLOW),
        "critical": Badge("Critical", RED),
        "pending": Badge("Pending", BLUE),
    },
    "med-samples": {
        "available": Badge("Available", GREEN),
        "distributed": Badge("Distributed", BLUE),
        "expired": Badge("Expired", RED),
        "returned": Badge("Returned", GRAY),
    },
    "records": {
        "completed": Badge("Completed", GREEN),
        "reviewed": Badge("Reviewed", BLUE),
        "draft": Badge("Draft", YELLOW),
        "archived": Badge("Archived", GRAY),
    },
}

TYPE_BADGES: Dict[str, Dict[str, Badge]] = {
    "appointments": {
        "consultation": Badge("Consultation", _outline("blue")),
        "follow-up": Badge("Follow-up", _outline("green")),
        "emergency": Badge("Emergency", _outline("red")),
        "routine": Badge("Routine", _outline("purple")),
        "procedure": Badge("Procedure", _outline("orange")),
        "lab-test": Badge("Lab Test", _outline("cyan")),
    },
    "rooms": {
        "consultation": Badge("Consultation", _outline("blue")),
        "examination": Badge("Examination", _outline("green")),
        "procedure": Badge("Procedure", _outline("purple")),
        "emergency": Badge("Emergency", _outline("red")),
        "lab": Badge("Lab", _outline("cyan")),
    },
    "messages": {
        "email": Badge("Email", _outline("blue")),
        "sms": Badge("SMS", _outline("green")),
        "video": Badge("Video", _outline("purple")),
        "phone": Badge("Phone", _outline("orange")),
        "in-app": Badge("In-App", _outline("cyan")),
    },
    "lab-results": {
        "blood": Badge("Blood Test", _outline("red")),
        "urine": Badge("Urine Test", _outline("yellow")),
        "imaging": Badge("Imaging", _outline("blue")),
        "biopsy": Badge("Biopsy", _outline("purple")),
        "culture": Badge("Culture", _outline("green")),
        "other": Badge("Other", _outline("gray")),
    },
    "med-samples": {
        "tablet": Badge("Tablet", _outline("blue")),
        "capsule": Badge("Capsule", _outline("green")),
        "injection": Badge("Injection", _outline("red")),
        "cream": Badge("Cream", _outline("purple")),
        "syrup": Badge("Syrup", _outline("orange")),
        "other": Badge("Other", _outline("gray")),
    },
    "records": {
        "consultation": Badge("Consultation", _outline("blue")),
        "diagnosis": Badge("Diagnosis", _outline("red")),
        "treatment": Badge("Treatment", _outline("green")),
        "lab-result": Badge("Lab Result", _outline("purple")),
        "prescription": Badge("Prescription", _outline("orange")),
        "follow-up": Badge("Follow-up", _outline("cyan")),
    },
}

PRIORITY_BADGES: Dict[str, Badge] = {
    "emergency": Badge("Emergency", RED),
    "urgent": Badge("Urgent", RED),
    "high": Badge("High", ORANGE),
    "normal": Badge("Normal", BLUE),
    "low": Badge("Low", GRAY),
}

RESULT_FLAG_BADGES: Dict[str, Badge] = {
    "normal": Badge("Normal", "text-green-600 bg-green-50 dark:bg-green-900/20"),
    "high": Badge("High", "text-red-600 bg-red-50 dark:bg-red-900/20"),
    "low": Badge("Low", "text-blue-600 bg-blue-50 dark:bg-blue-900/20"),
    "critical": Badge("Critical", "text-red-600 bg-red-50 dark:bg-red-900/20"),
}

CALENDAR_COLORS: Dict[str, str] = {
    "scheduled": "#3b82f6",
    "confirmed": "#10b981",
    "in-progress": "#f59e0b",
    "completed": "#6b7280",
    "cancelled": "#ef4444",
    "no-show": "#8b5cf6",
    "rescheduled": "#06b6d4",
    "waiting": "#f97316",
    "checked-in": "#84cc16",
    "checked-out": "#6366f1",
}
DEFAULT_CALENDAR_COLOR = "#6b7280"


def normalize_key(value: Optional[str]) -> str:
    """'No_Show', 'no show' and 'no-show' all map to 'no-show'"""
    if value is None:
        return ""
    return "-".join(str(value).strip().lower().replace("_", " ").replace("-", " ").split())


def status_badge(resource: str, status: Optional[str]) -> Badge:
    return STATUS_BADGES.get(resource, {}).get(normalize_key(status), NEUTRAL)


def type_badge(resource: str, type_: Optional[str]) -> Badge:
    return TYPE_BADGES.get(resource, {}).get(normalize_key(type_), NEUTRAL_OUTLINE)


def priority_badge(priority: Optional[str]) -> Badge:
    return PRIORITY_BADGES.get(normalize_key(priority), NEUTRAL)


def result_flag_badge(flag: Optional[str]) -> Badge:
    return RESULT_FLAG_BADGES.get(normalize_key(flag), Badge("Unknown", "text-gray-600 bg-gray-50 dark:bg-gray-900/20"))


def calendar_color(status: Optional[str]) -> str:
    return CALENDAR_COLORS.get(normalize_key(status), DEFAULT_CALENDAR_COLOR)
