# styles.py
# Display classes keyed by the enum values found in loader output.
# Every table has a "default" entry used for values it does not list.

WASTE_TYPE = {
    "Wet Waste": "bg-green-100 text-green-800 dark:bg-green-900/30 dark:text-green-300",
    "Dry Waste": "bg-blue-100 text-blue-800 dark:bg-blue-900/30 dark:text-blue-300",
    "Hazardous Waste": "bg-red-100 text-red-800 dark:bg-red-900/30 dark:text-red-300",
    "default": "bg-red-100 text-red-800 dark:bg-red-900/30 dark:text-red-300",
}

NOTIFICATION = {
    "success": "bg-green-100 dark:bg-green-900/30 text-green-800 dark:text-green-200",
    "info": "bg-blue-100 dark:bg-blue-900/30 text-blue-800 dark:text-blue-200",
    "default": "bg-blue-100 dark:bg-blue-900/30 text-blue-800 dark:text-blue-200",
}

# bar fill on the authority ward list
WARD_STATUS = {
    "excellent": "bg-green-500",
    "good": "bg-blue-500",
    "average": "bg-yellow-500",
    "needs-attention": "bg-red-500",
    "default": "bg-red-500",
}

SCORE_TEXT = {
    "high": "text-green-600",
    "medium": "text-yellow-600",
    "low": "text-red-600",
    "default": "text-red-600",
}

SCORE_BAR = {
    "high": "bg-green-500",
    "medium": "bg-yellow-500",
    "low": "bg-red-500",
    "default": "bg-red-500",
}

PRIORITY = {
    "high": "bg-red-100 text-red-700 dark:bg-red-900/30 dark:text-red-400",
    "medium": "bg-yellow-100 text-yellow-700 dark:bg-yellow-900/30 dark:text-yellow-400",
    "low": "bg-zinc-100 text-zinc-700 dark:bg-zinc-700 dark:text-zinc-300",
    "default": "bg-zinc-100 text-zinc-700 dark:bg-zinc-700 dark:text-zinc-300",
}

REPORT_STATUS = {
    "open": "bg-blue-100 text-blue-700 dark:bg-blue-900/30 dark:text-blue-400",
    "in-progress": "bg-yellow-100 text-yellow-700 dark:bg-yellow-900/30 dark:text-yellow-400",
    "resolved": "bg-green-100 text-green-700 dark:bg-green-900/30 dark:text-green-400",
    "under-review": "bg-purple-100 text-purple-700 dark:bg-purple-900/30 dark:text-purple-400",
    "acknowledged": "bg-zinc-100 text-zinc-700 dark:bg-zinc-700 dark:text-zinc-300",
    "default": "bg-blue-100 text-blue-700 dark:bg-blue-900/30 dark:text-blue-400",
}

EVENT_TYPE = {
    "awareness": "bg-blue-100 text-blue-700 dark:bg-blue-900/30 dark:text-blue-400",
    "collection": "bg-green-100 text-green-700 dark:bg-green-900/30 dark:text-green-400",
    "workshop": "bg-purple-100 text-purple-700 dark:bg-purple-900/30 dark:text-purple-400",
    "cleanup": "bg-orange-100 text-orange-700 dark:bg-orange-900/30 dark:text-orange-400",
    "default": "bg-blue-100 text-blue-700 dark:bg-blue-900/30 dark:text-blue-400",
}

# rank disc on the ward leaderboard
WARD_RANK = {
    1: "bg-yellow-500 text-white",
    2: "bg-zinc-300 text-zinc-700",
    3: "bg-orange-400 text-white",
    "default": "bg-zinc-100 text-zinc-600 dark:bg-zinc-700 dark:text-zinc-300",
}

WASTE_CATEGORY = {
    "green": "bg-green-100 dark:bg-green-900/30 border-green-300 dark:border-green-700",
    "blue": "bg-blue-100 dark:bg-blue-900/30 border-blue-300 dark:border-blue-700",
    "red": "bg-red-100 dark:bg-red-900/30 border-red-300 dark:border-red-700",
    "default": "bg-zinc-100 dark:bg-zinc-800 border-zinc-300 dark:border-zinc-700",
}

ROLE_CARD = {
    "green": "hover:border-green-500 hover:bg-green-50 dark:hover:bg-green-900/20",
    "blue": "hover:border-blue-500 hover:bg-blue-50 dark:hover:bg-blue-900/20",
    "purple": "hover:border-purple-500 hover:bg-purple-50 dark:hover:bg-purple-900/20",
    "default": "hover:border-zinc-400",
}

TABLES = {
    "waste_type": WASTE_TYPE,
    "notification": NOTIFICATION,
    "ward_status": WARD_STATUS,
    "score_text": SCORE_TEXT,
    "score_bar": SCORE_BAR,
    "priority": PRIORITY,
    "report_status": REPORT_STATUS,
    "event_type": EVENT_TYPE,
    "ward_rank": WARD_RANK,
    "waste_category": WASTE_CATEGORY,
    "role_card": ROLE_CARD,
}


def style_for(kind: str, value) -> str:
    """
    Look up the display classes for ``value`` in the ``kind`` table.
    Exact match first, then a case-insensitive match for strings,
    then the table's default.
    """
    table = TABLES[kind]
    if value in table:
        return table[value]
    if isinstance(value, str):
        low = value.strip().lower()
        for k in table.keys():
            if isinstance(k, str) and k.lower() == low:
                return table[k]
    return table["default"]


def status_label(status: str) -> str:
    return (status or "").replace("-", " ")
