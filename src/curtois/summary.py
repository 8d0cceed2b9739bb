# curtois/summary.py
from __future__ import annotations

import sys
from typing import Any

from curtois.instance import Instance


def instance_summary(instance: Instance) -> dict[str, Any]:
    n_staff = len(instance.staff)
    days_off_total = sum(len(days) for days in instance.days_off.values())
    demand = sum(c.required for c in instance.cover)
    on_weight = sum(r.weight for r in instance.shift_on_requests)
    off_weight = sum(r.weight for r in instance.shift_off_requests)
    return {
        "horizon": instance.horizon,
        "shifts": len(instance.shifts),
        "staff": n_staff,
        "days_off": days_off_total,
        "days_off_per_staff": days_off_total / n_staff if n_staff else 0.0,
        "shift_on_requests": len(instance.shift_on_requests),
        "shift_off_requests": len(instance.shift_off_requests),
        "shift_on_weight": on_weight,
        "shift_off_weight": off_weight,
        "cover_rows": len(instance.cover),
        "required_shifts": demand,
        "max_minutes_total": sum(s.max_minutes for s in instance.staff),
        "demand_minutes": _demand_minutes(instance),
    }


def _demand_minutes(instance: Instance) -> int:
    """Σ required × shift length over cover rows with a known shift."""
    lengths = {s.id: s.length for s in instance.shifts}
    return sum(c.required * lengths.get(c.shift_id, 0) for c in instance.cover)


def print_instance_summary(instance: Instance, *, title: str = "", stream=None) -> None:
    """
    Print a short overview of an instance.

    The capacity line compares the staff's summed max minutes against the
    minutes demanded by cover rows; it is a sanity check only.
    """
    stream = stream or sys.stdout
    s = instance_summary(instance)
    print(f"\nInstance{f' {title}' if title else ''}:\n", file=stream)
    print(
        f"horizon={s['horizon']} days | shifts={s['shifts']} | staff={s['staff']}",
        file=stream,
    )
    print(
        f"days off={s['days_off']} ({s['days_off_per_staff']:.2f} per staff) | "
        f"on requests={s['shift_on_requests']} (weight {s['shift_on_weight']:,}) | "
        f"off requests={s['shift_off_requests']} (weight {s['shift_off_weight']:,})",
        file=stream,
    )
    print(
        f"cover rows={s['cover_rows']} | required shifts={s['required_shifts']:,}",
        file=stream,
    )
    cap, dem = s["max_minutes_total"], s["demand_minutes"]
    if cap >= dem:
        print(f"✅ Max minutes = {cap:,} | demand minutes = {dem:,} | OK", file=stream)
    else:
        print(
            f"❌ Max minutes = {cap:,} | demand minutes = {dem:,} | NOT OK",
            file=stream,
        )
