# content.py
# Copy for the static pages. Rendered as-is, never regenerated.

FEATURES = [
    {"emoji": "🏠", "title": "Household Tracking",
     "description": "Monitor your segregation score and track your contribution to cleaner communities.",
     "endpoint": "dashboard.household"},
    {"emoji": "📊", "title": "Real-time Analytics",
     "description": "Access live reports, heatmaps, and performance metrics for your ward.",
     "endpoint": "stats.overview"},
    {"emoji": "📝", "title": "Issue Reporting",
     "description": "Report segregation issues and track resolution status in real-time.",
     "endpoint": "dashboard.reports"},
]

IMPACT = [
    {"value": "50,000+", "label": "Households Registered"},
    {"value": "85%", "label": "Average Segregation Rate"},
    {"value": "120+", "label": "Wards Covered"},
    {"value": "2,500+", "label": "Issues Resolved"},
]

STEPS = [
    {"title": "Register Your Household",
     "description": "Sign up and link your address to start tracking your segregation efforts."},
    {"title": "Segregate & Report",
     "description": "Properly segregate waste and log your daily disposal activities."},
    {"title": "Collector Validation",
     "description": "Waste collectors verify segregation quality during pickup."},
    {"title": "Track & Improve",
     "description": "Monitor your scores, compare with neighbors, and improve over time."},
]

STAKEHOLDERS = [
    {"emoji": "🏠", "title": "Households",
     "description": "Track segregation scores, report issues, and earn recognition for good practices."},
    {"emoji": "🚛", "title": "Waste Collectors",
     "description": "Validate segregation quality, report violations, and optimize collection routes."},
    {"emoji": "🏛️", "title": "Municipal Authorities",
     "description": "Access real-time dashboards, analytics, and ward-level performance data."},
]

WASTE_CATEGORIES = [
    {
        "type": "Wet Waste",
        "emoji": "🥬",
        "color": "green",
        "description": "Biodegradable waste that can be composted",
        "items": [
            "Food scraps and leftovers",
            "Fruit and vegetable peels",
            "Coffee grounds and tea bags",
            "Garden waste and leaves",
            "Eggshells",
        ],
    },
    {
        "type": "Dry Waste",
        "emoji": "📦",
        "color": "blue",
        "description": "Recyclable materials that can be processed",
        "items": [
            "Paper and cardboard",
            "Plastic bottles and containers",
            "Glass bottles and jars",
            "Metal cans and foils",
            "Cloth and fabric scraps",
        ],
    },
    {
        "type": "Hazardous Waste",
        "emoji": "⚠️",
        "color": "red",
        "description": "Dangerous materials requiring special disposal",
        "items": [
            "Batteries and electronics",
            "Medical waste and syringes",
            "Paint and chemicals",
            "Fluorescent bulbs",
            "Expired medicines",
        ],
    },
]

BEST_PRACTICES = [
    "Keep separate bins for wet, dry, and hazardous waste",
    "Rinse containers before putting them in dry waste",
    "Wrap wet waste in newspaper to prevent leakage",
    "Store hazardous waste safely until collection day",
    "Compost wet waste at home if possible",
    "Avoid mixing waste types in the same bag",
]

FAQS = [
    {
        "question": "What is WasteWise?",
        "answer": "WasteWise is a community-driven platform that helps households, waste collectors, "
                  "and municipal authorities track and improve waste segregation at the source. "
                  "It provides real-time monitoring, scoring, and reporting features.",
    },
    {
        "question": "How do I register my household?",
        "answer": "You can register by creating an account on the dashboard. You'll need to provide "
                  "your address and ward details. Once registered, you can start logging your "
                  "segregation activities.",
    },
    {
        "question": "What are the three categories of waste?",
        "answer": "Waste is categorized into: (1) Wet Waste - biodegradable items like food scraps and "
                  "garden waste, (2) Dry Waste - recyclable materials like paper, plastic, and glass, "
                  "and (3) Hazardous Waste - dangerous items like batteries, electronics, and medical waste.",
    },
    {
        "question": "How is my segregation score calculated?",
        "answer": "Your score is based on collector validations during pickup, consistency of "
                  "segregation over time, and any reported issues. Properly segregated waste earns "
                  "points, while mixing or contamination reduces your score.",
    },
    {
        "question": "What happens if I don't segregate properly?",
        "answer": "Improper segregation leads to a lower household score and may be flagged by "
                  "collectors. Persistent issues may result in notices from municipal authorities. "
                  "The goal is improvement, not punishment.",
    },
    {
        "question": "Can I report issues with waste collection?",
        "answer": "Yes! You can report missed collections, improper handling by collectors, or any "
                  "other issues through the dashboard. All reports are tracked and routed to the "
                  "appropriate authorities.",
    },
    {
        "question": "How do collectors validate my segregation?",
        "answer": "During pickup, collectors use the WasteWise app to mark whether your waste was "
                  "properly segregated. They can flag issues like mixed waste, contamination, or use "
                  "of wrong bags.",
    },
    {
        "question": "Are there rewards for good segregation?",
        "answer": "Yes! Households with consistently high scores appear on community leaderboards and "
                  "may be eligible for recognition certificates, reduced waste collection fees, or "
                  "other incentives depending on your municipality.",
    },
    {
        "question": "How can I see my ward's performance?",
        "answer": "The Statistics section shows ward-level data including average segregation rates, "
                  "trends over time, and comparisons with other wards. This data is refreshed every "
                  "few minutes.",
    },
    {
        "question": "Is my data private?",
        "answer": "Yes. Individual household data is only visible to you and authorized municipal "
                  "officials. Public statistics are anonymized and aggregated at the ward level.",
    },
]

ROLES = [
    {"emoji": "🏠", "title": "Household", "color": "green", "endpoint": "dashboard.household",
     "description": "Track your segregation score, log waste disposal, and view your household's performance."},
    {"emoji": "🚛", "title": "Collector", "color": "blue", "endpoint": "dashboard.collector",
     "description": "Validate household segregation, manage your collection route, and report issues."},
    {"emoji": "🏛️", "title": "Authority", "color": "purple", "endpoint": "dashboard.authority",
     "description": "Access real-time analytics, ward performance, heatmaps, and issue management."},
]

QUICK_LINKS = [
    {"endpoint": "stats.overview", "label": "View Statistics", "emoji": "📊"},
    {"endpoint": "dashboard.reports", "label": "Report Issue", "emoji": "📝"},
    {"endpoint": "pages.education", "label": "Learn About Segregation", "emoji": "📚"},
    {"endpoint": "stats.leaderboard", "label": "Community Leaderboard", "emoji": "🏆"},
]
