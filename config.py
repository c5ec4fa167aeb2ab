# config.py
import os

from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")  # set via env var in prod
SITE_NAME = os.getenv("SITE_NAME", "WasteWise")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Page cache backend (any Flask-Caching CACHE_TYPE)
CACHE_TYPE = os.getenv("CACHE_TYPE", "SimpleCache")

# Regeneration intervals in seconds
STATISTICS_REVALIDATE = int(os.getenv("STATISTICS_REVALIDATE", "300"))
LEADERBOARD_REVALIDATE = int(os.getenv("LEADERBOARD_REVALIDATE", "600"))
EVENTS_REVALIDATE = int(os.getenv("EVENTS_REVALIDATE", "3600"))


def flask_settings() -> dict:
    """Settings handed to ``app.config`` by ``create_app``."""
    return {
        "SECRET_KEY": SECRET_KEY,
        "SITE_NAME": SITE_NAME,
        "LOG_LEVEL": LOG_LEVEL,
        "CACHE_TYPE": CACHE_TYPE,
        "STATISTICS_REVALIDATE": STATISTICS_REVALIDATE,
        "LEADERBOARD_REVALIDATE": LEADERBOARD_REVALIDATE,
        "EVENTS_REVALIDATE": EVENTS_REVALIDATE,
    }
