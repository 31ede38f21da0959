"""Language packs shipped with howlongago.

English is the universal fallback: unknown registry keys resolve to it and
new keys are merged on top of it.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from .pack import LanguagePack

__all__ = ["DEFAULT_PACKS"]

_ENGLISH = LanguagePack.from_mapping({
    "just_now": "Just now",
    "past_templates": {
        "second": "{c} second ago",
        "seconds": "{c} seconds ago",
        "minute": "{c} minute ago",
        "minutes": "{c} minutes ago",
        "hour": "{c} hour ago",
        "hours": "{c} hours ago",
        "day": "{c} day ago",
        "days": "{c} days ago",
        "week": "{c} week ago",
        "weeks": "{c} weeks ago",
        "month": "{c} month ago",
        "months": "{c} months ago",
        "year": "{c} year ago",
        "years": "{c} years ago",
    },
    "future_templates": {
        "second": "In {c} second",
        "seconds": "In {c} seconds",
        "minute": "In {c} minute",
        "minutes": "In {c} minutes",
        "hour": "In {c} hour",
        "hours": "In {c} hours",
        "day": "In {c} day",
        "days": "In {c} days",
        "week": "In {c} week",
        "weeks": "In {c} weeks",
        "month": "In {c} month",
        "months": "In {c} months",
        "year": "In {c} year",
        "years": "In {c} years",
    },
})

# Vietnamese has no plural inflection; singular and plural read the same.
_VIETNAMESE = LanguagePack.from_mapping({
    "just_now": "vừa xong",
    "past_templates": {
        "second": "{c} giây trước",
        "seconds": "{c} giây trước",
        "minute": "{c} phút trước",
        "minutes": "{c} phút trước",
        "hour": "{c} giờ trước",
        "hours": "{c} giờ trước",
        "day": "{c} ngày trước",
        "days": "{c} ngày trước",
        "week": "{c} tuần trước",
        "weeks": "{c} tuần trước",
        "month": "{c} tháng trước",
        "months": "{c} tháng trước",
        "year": "{c} năm trước",
        "years": "{c} năm trước",
    },
    "future_templates": {
        "second": "Sau {c} giây",
        "seconds": "Sau {c} giây",
        "minute": "Sau {c} phút",
        "minutes": "Sau {c} phút",
        "hour": "Sau {c} giờ",
        "hours": "Sau {c} giờ",
        "day": "Sau {c} ngày",
        "days": "Sau {c} ngày",
        "week": "Sau {c} tuần",
        "weeks": "Sau {c} tuần",
        "month": "Sau {c} tháng",
        "months": "Sau {c} tháng",
        "year": "Sau {c} năm",
        "years": "Sau {c} năm",
    },
})

DEFAULT_PACKS: MappingProxyType[str, LanguagePack] = MappingProxyType({
    "en": _ENGLISH,
    "vi": _VIETNAMESE,
})
