"""Recent activity CLI flow.

Summarizes the event log: how many checks and generations ran, how
they rated, and the most recent entries. Only scores are shown, the log
never holds passwords.
"""

from core.events import count_events_by_status, count_ratings, get_events
from core.scoring import Rating


def review_activity(count: int = 10) -> list[dict]:
    """Print a summary of logged events and the last few entries.

    Args:
        count: Number of recent entries to list

    Returns:
        The recent entries that were listed
    """
    recent = get_events(limit=count)
    if not recent:
        print("No activity recorded yet.")
        return []

    print("\n=== Activity Summary ===")
    for event_type in ("evaluate", "generate"):
        statuses = count_events_by_status(event_type)
        if statuses:
            summary = ", ".join(f"{status}: {n}" for status, n in sorted(statuses.items()))
            print(f"{event_type}: {summary}")

    ratings = count_ratings()
    if ratings:
        print("Ratings:")
        for rating in Rating:
            if rating.value in ratings:
                print(f"  {rating.value}: {ratings[rating.value]}")

    print(f"\n=== Last {len(recent)} Events ===")
    for event in recent:
        details = event.get("details", {})
        line = f"{event.get('timestamp', '?')} {event.get('event_type', '?')} {event.get('status', '?')}"
        if "score" in details:
            line += f" - {details.get('rating')} ({details['score']}%), length {details.get('length')}"
        print(line)

    return recent


def view_activity_flow() -> None:
    """Show recent strength-check activity."""
    print("\n--- Recent Activity ---")
    review_activity()
