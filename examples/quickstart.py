"""Quickstart example for howlongago.

This example demonstrates formatting relative time phrases, switching
languages, and adding a language pack.
"""

from datetime import datetime, timedelta, timezone

from howlongago import FormatOptions, format_time_difference, register_locale

REFERENCE = datetime(2023, 10, 27, 10, 0, tzinfo=timezone.utc)

# Example 1: Past and future
print("=" * 50)
print("Example 1: Past and Future")
print("=" * 50)

options = FormatOptions(reference=REFERENCE)

print(format_time_difference(REFERENCE - timedelta(seconds=3), options).text)
# Output: Just now

print(format_time_difference(REFERENCE - timedelta(minutes=5), options).text)
# Output: 5 minutes ago

print(format_time_difference(REFERENCE + timedelta(days=2), options).text)
# Output: In 2 days

print(format_time_difference("2022-10-27T09:59:59Z", options).text)
# Output: 1 year ago

# Example 2: Structured result
print("\n" + "=" * 50)
print("Example 2: Structured Result")
print("=" * 50)

result = format_time_difference(REFERENCE + timedelta(hours=3), options)
print(result.unit, result.raw_difference_milliseconds, result.is_future)
# Output: hour -10800000 True

# Example 3: Vietnamese
print("\n" + "=" * 50)
print("Example 3: Vietnamese")
print("=" * 50)

vi = FormatOptions(locale="vi", reference=REFERENCE)
print(format_time_difference(REFERENCE - timedelta(minutes=5, seconds=1), vi).text)
# Output: 5 phút trước
print(format_time_difference(REFERENCE + timedelta(weeks=2), vi).text)
# Output: Sau 2 tuần

# Example 4: Registering a language
print("\n" + "=" * 50)
print("Example 4: Registering a Language")
print("=" * 50)

register_locale("fr", {
    "just_now": "À l'instant",
    "past_templates": {"hour": "il y a {c} heure", "hours": "il y a {c} heures"},
})
fr = FormatOptions(locale="fr", reference=REFERENCE)
print(format_time_difference(REFERENCE - timedelta(hours=4), fr).text)
# Output: il y a 4 heures
print(format_time_difference(REFERENCE - timedelta(days=4), fr).text)
# Output: 4 days ago  (missing templates come from English)

# Example 5: One-off inline pack
print("\n" + "=" * 50)
print("Example 5: Inline Pack")
print("=" * 50)

short = FormatOptions(
    locale={"past_templates": {"minutes": "{c}m ago", "hours": "{c}h ago"}},
    reference=REFERENCE,
)
print(format_time_difference(REFERENCE - timedelta(minutes=42), short).text)
# Output: 42m ago
print(format_time_difference(REFERENCE - timedelta(minutes=42), options).text)
# Output: 42 minutes ago  (registry unchanged)
