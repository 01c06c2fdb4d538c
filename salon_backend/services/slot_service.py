# salon_backend/services/slot_service.py
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from salon_backend.models.availability_model import Availability
from salon_backend.models.blocked_slot_model import BlockedSlot


def to_minutes(hhmm: str) -> int:
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def from_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def day_number(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def generate_time_slots(start_time: str, end_time: str, interval_minutes: int = 30) -> List[str]:
    """Start times every ``interval_minutes`` from start up to and including end."""
    start, end = to_minutes(start_time), to_minutes(end_time)
    step = max(1, interval_minutes)
    return [from_minutes(t) for t in range(start, end + 1, step)]


def windows_for_date(windows: Iterable[Availability], day: str, weekday: int) -> List[Availability]:
    out = []
    for w in windows:
        if w.day_of_week != weekday or not w.is_available:
            continue
        if w.start_date and day < w.start_date:
            continue
        if w.end_date and day > w.end_date:
            continue
        out.append(w)
    return out


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return (b_start <= a_start < b_end) or (a_start <= b_start < a_end)


def compute_slots(
    day: str,
    duration: int,
    windows: Sequence[Availability],
    booked_times: Sequence[str],
    blocked: Sequence[BlockedSlot],
    now: Optional[datetime] = None,
    buffer_minutes: int = 30,
) -> List[Tuple[str, bool]]:
    """(time, available) pairs for one day, sorted by time."""
    times = sorted({t for w in windows for t in generate_time_slots(w.start_time, w.end_time, duration)})
    if not times:
        return []

    now = now or datetime.now()
    is_today = day == now.date().isoformat()
    earliest = now.hour * 60 + now.minute + buffer_minutes

    busy = [(to_minutes(t), to_minutes(t) + duration) for t in booked_times]
    for b in blocked:
        start = to_minutes(b.start_time)
        end = to_minutes(b.end_time) if b.end_time else start + duration
        busy.append((start, end))

    slots = []
    for t in times:
        start = to_minutes(t)
        end = start + duration
        past = is_today and start < earliest
        taken = any(_overlaps(start, end, b_start, b_end) for b_start, b_end in busy)
        slots.append((t, not past and not taken))
    return slots
