# app/clock.py

from datetime import datetime
from zoneinfo import ZoneInfo

from app.config import settings
from app.slots import SlotRules


def get_now() -> datetime:
    """Shop wall-clock time, naive, the same way dates and times are stored."""
    return datetime.now(ZoneInfo(settings.SHOP_TIMEZONE)).replace(tzinfo=None)


def get_rules() -> SlotRules:
    return SlotRules.from_settings(settings)
