# sample_data.py
# Records served by the page loaders until a backend exists.
# Ward status and household badges are derived in the loaders, not stored here.

HOUSEHOLD = {
    "household_id": "HH-12345",
    "address": "123 Green Street, Ward 15",
    "segregation_score": 87,
    "total_logs": 156,
    "current_streak": 12,
    "recent_activity": [
        {"date": "2026-01-20", "waste_type": "Wet Waste", "validated": True},
        {"date": "2026-01-19", "waste_type": "Dry Waste", "validated": True},
        {"date": "2026-01-18", "waste_type": "Wet Waste", "validated": True},
        {"date": "2026-01-17", "waste_type": "Dry Waste", "validated": False},
        {"date": "2026-01-16", "waste_type": "Hazardous Waste", "validated": True},
    ],
}

NOTIFICATIONS = [
    {"id": 1, "message": "Collection scheduled for tomorrow 8 AM", "type": "info"},
    {"id": 2, "message": "Great job! 12-day segregation streak!", "type": "success"},
]

COLLECTOR = {
    "collector_id": "COL-789",
    "name": "Ravi Kumar",
    "assigned_ward": "Ward 15",
    "today_stats": {
        "households_visited": 45,
        "total_assigned": 120,
        "properly_segregated": 38,
        "issues": 7,
    },
}

PENDING_VALIDATIONS = [
    {"id": "V001", "household_id": "HH-12345", "address": "123 Green Street",
     "waste_type": "Wet Waste", "scheduled_time": "08:30 AM"},
    {"id": "V002", "household_id": "HH-12346", "address": "125 Green Street",
     "waste_type": "Dry Waste", "scheduled_time": "08:45 AM"},
    {"id": "V003", "household_id": "HH-12347", "address": "127 Green Street",
     "waste_type": "Wet Waste", "scheduled_time": "09:00 AM"},
    {"id": "V004", "household_id": "HH-12348", "address": "129 Green Street",
     "waste_type": "Hazardous Waste", "scheduled_time": "09:15 AM"},
]

AUTHORITY = {
    "officer_id": "AUTH-001",
    "name": "Municipal Officer",
    "jurisdiction": "Zone A - Wards 1-25",
}

LIVE_STATS = {
    "total_households": 52340,
    "active_collectors": 156,
    "today_collections": 34521,
    "average_segregation_rate": 84.5,
    "open_issues": 127,
    "resolved_today": 45,
}

WARD_PERFORMANCE = [
    {"ward": "Ward 1", "score": 92, "households": 2100},
    {"ward": "Ward 2", "score": 88, "households": 1850},
    {"ward": "Ward 3", "score": 76, "households": 2300},
    {"ward": "Ward 4", "score": 65, "households": 1950},
    {"ward": "Ward 5", "score": 91, "households": 2050},
    {"ward": "Ward 6", "score": 82, "households": 2200},
]

RECENT_ISSUES = [
    {"id": "ISS-001", "ward": "Ward 4", "type": "Mixed Waste", "priority": "high", "time": "10 min ago"},
    {"id": "ISS-002", "ward": "Ward 3", "type": "Missed Collection", "priority": "medium", "time": "25 min ago"},
    {"id": "ISS-003", "ward": "Ward 4", "type": "Improper Disposal", "priority": "high", "time": "1 hour ago"},
    {"id": "ISS-004", "ward": "Ward 2", "type": "Container Overflow", "priority": "low", "time": "2 hours ago"},
]

USER_REPORTS = [
    {"id": "RPT-001", "title": "Missed collection on Monday", "type": "Missed Collection",
     "status": "resolved", "created_at": "2026-01-18", "resolved_at": "2026-01-19"},
    {"id": "RPT-002", "title": "Collector mixed wet and dry waste", "type": "Improper Handling",
     "status": "in-progress", "created_at": "2026-01-19", "resolved_at": None},
    {"id": "RPT-003", "title": "Overflowing community bin", "type": "Infrastructure",
     "status": "open", "created_at": "2026-01-20", "resolved_at": None},
]

COMMUNITY_ISSUES = [
    {"id": "COM-001", "title": "Stray animals opening waste bags", "ward": "Ward 15",
     "reported_by": "Multiple households", "upvotes": 23, "status": "under-review"},
    {"id": "COM-002", "title": "Need more dry waste collection days", "ward": "Ward 15",
     "reported_by": "Community Forum", "upvotes": 45, "status": "acknowledged"},
]

OVERALL_STATS = {
    "total_households": 52340,
    "participating_households": 48750,
    "average_segregation_rate": 84.5,
    "wet_waste_collected": "1,250 tons",
    "dry_waste_recycled": "890 tons",
    "issues_resolved": 2450,
}

WARD_TRENDS = [
    {"ward": "Ward 1", "score": 92, "households": 2100, "trend": "up", "change": 3},
    {"ward": "Ward 2", "score": 88, "households": 1850, "trend": "up", "change": 2},
    {"ward": "Ward 3", "score": 76, "households": 2300, "trend": "down", "change": -4},
    {"ward": "Ward 4", "score": 65, "households": 1950, "trend": "down", "change": -2},
    {"ward": "Ward 5", "score": 91, "households": 2050, "trend": "up", "change": 5},
    {"ward": "Ward 6", "score": 82, "households": 2200, "trend": "stable", "change": 0},
    {"ward": "Ward 7", "score": 79, "households": 1900, "trend": "up", "change": 1},
    {"ward": "Ward 8", "score": 87, "households": 2150, "trend": "up", "change": 4},
]

MONTHLY_TREND = [
    {"month": "Aug", "rate": 72},
    {"month": "Sep", "rate": 75},
    {"month": "Oct", "rate": 78},
    {"month": "Nov", "rate": 81},
    {"month": "Dec", "rate": 83},
    {"month": "Jan", "rate": 85},
]

HOUSEHOLD_LEADERS = [
    {"rank": 1, "name": "Sharma Family", "ward": "Ward 5", "score": 98, "streak": 45},
    {"rank": 2, "name": "Patel Residence", "ward": "Ward 1", "score": 97, "streak": 38},
    {"rank": 3, "name": "Kumar Household", "ward": "Ward 8", "score": 96, "streak": 42},
    {"rank": 4, "name": "Singh Family", "ward": "Ward 2", "score": 95, "streak": 30},
    {"rank": 5, "name": "Reddy Home", "ward": "Ward 1", "score": 94, "streak": 28},
    {"rank": 6, "name": "Gupta Residence", "ward": "Ward 6", "score": 93, "streak": 25},
    {"rank": 7, "name": "Joshi Family", "ward": "Ward 5", "score": 92, "streak": 22},
    {"rank": 8, "name": "Mehta Household", "ward": "Ward 3", "score": 91, "streak": 20},
    {"rank": 9, "name": "Verma Home", "ward": "Ward 7", "score": 90, "streak": 18},
    {"rank": 10, "name": "Iyer Residence", "ward": "Ward 2", "score": 89, "streak": 15},
]

WARD_LEADERS = [
    {"rank": 1, "ward": "Ward 1", "score": 92, "households": 2100, "improvement": 5},
    {"rank": 2, "ward": "Ward 5", "score": 91, "households": 2050, "improvement": 8},
    {"rank": 3, "ward": "Ward 2", "score": 88, "households": 1850, "improvement": 3},
    {"rank": 4, "ward": "Ward 8", "score": 87, "households": 2150, "improvement": 6},
    {"rank": 5, "ward": "Ward 6", "score": 82, "households": 2200, "improvement": 2},
]

COLLECTOR_LEADERS = [
    {"rank": 1, "name": "Ravi Kumar", "validations": 1250, "accuracy": 99.2},
    {"rank": 2, "name": "Suresh B", "validations": 1180, "accuracy": 98.8},
    {"rank": 3, "name": "Mohan S", "validations": 1150, "accuracy": 98.5},
]

UPCOMING_EVENTS = [
    {
        "id": "EVT-001",
        "title": "Ward 15 Segregation Drive",
        "date": "2026-01-25",
        "time": "9:00 AM - 12:00 PM",
        "location": "Community Hall, Ward 15",
        "description": "Join us for a community awareness drive on proper waste segregation techniques.",
        "type": "awareness",
    },
    {
        "id": "EVT-002",
        "title": "E-Waste Collection Day",
        "date": "2026-02-01",
        "time": "8:00 AM - 5:00 PM",
        "location": "Municipal Ground, Central Zone",
        "description": "Special collection day for electronic waste. Bring your old devices for safe disposal.",
        "type": "collection",
    },
    {
        "id": "EVT-003",
        "title": "Composting Workshop",
        "date": "2026-02-08",
        "time": "10:00 AM - 1:00 PM",
        "location": "Green Garden, Ward 5",
        "description": "Learn how to compost wet waste at home and reduce your environmental footprint.",
        "type": "workshop",
    },
]

PAST_EVENTS = [
    {"id": "EVT-P01", "title": "New Year Cleanup Drive", "date": "2026-01-02",
     "participants": 450, "waste_collected": "2.5 tons", "type": "cleanup"},
    {"id": "EVT-P02", "title": "School Awareness Program", "date": "2025-12-15",
     "participants": 1200, "schools": 8, "type": "awareness"},
]
