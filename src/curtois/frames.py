# curtois/frames.py
from __future__ import annotations

from pathlib import Path
from typing import Literal, Sequence

import numpy as np
import pandas as pd

from curtois.instance import Instance, Request

CoverField = Literal["required", "cost_under", "cost_over"]


def shifts_to_dataframe(instance: Instance) -> pd.DataFrame:
    rows = []
    for s in instance.shifts:
        rows.append(
            {
                "shift_id": s.id,
                "length": s.length,
                "forbidden_successors": s.forbidden_successors[:],
            }
        )
    return pd.DataFrame(rows, columns=["shift_id", "length", "forbidden_successors"])


def staff_to_dataframe(instance: Instance) -> pd.DataFrame:
    """
    One row per staff member with one `maxshifts_<shift>` column per shift type.

    Shift types absent from a member's mapping get 0 (they may not be assigned).
    """
    shift_ids = list(instance.shift_ids)
    for member in instance.staff:
        for sid in member.max_shifts:
            if sid not in shift_ids:
                shift_ids.append(sid)

    rows = []
    for m in instance.staff:
        row = {
            "staff_id": m.id,
            "max_minutes": m.max_minutes,
            "min_minutes": m.min_minutes,
            "max_consecutive_shifts": m.max_consecutive_shifts,
            "min_consecutive_shifts": m.min_consecutive_shifts,
            "min_consecutive_days_off": m.min_consecutive_days_off,
            "max_weekends": m.max_weekends,
            "days_off": len(instance.days_off.get(m.id, [])),
        }
        for sid in shift_ids:
            row[f"maxshifts_{sid}"] = m.max_shifts_of(sid)
        rows.append(row)
    columns = [
        "staff_id",
        "max_minutes",
        "min_minutes",
        "max_consecutive_shifts",
        "min_consecutive_shifts",
        "min_consecutive_days_off",
        "max_weekends",
        "days_off",
    ] + [f"maxshifts_{sid}" for sid in shift_ids]
    return pd.DataFrame(rows, columns=columns)


def days_off_to_dataframe(instance: Instance) -> pd.DataFrame:
    """Long form: one (staff_id, day) row per mandatory day off."""
    rows = [
        {"staff_id": staff_id, "day": day}
        for staff_id, days in instance.days_off.items()
        for day in days
    ]
    return pd.DataFrame(rows, columns=["staff_id", "day"])


def requests_to_dataframe(requests: Sequence[Request], kind: str) -> pd.DataFrame:
    rows = [
        {
            "staff_id": r.staff_id,
            "day": r.day,
            "shift_id": r.shift_id,
            "weight": r.weight,
            "kind": kind,
        }
        for r in requests
    ]
    return pd.DataFrame(rows, columns=["staff_id", "day", "shift_id", "weight", "kind"])


def cover_to_dataframe(instance: Instance) -> pd.DataFrame:
    rows = [
        {
            "day": c.day,
            "shift_id": c.shift_id,
            "required": c.required,
            "cost_under": c.cost_under,
            "cost_over": c.cost_over,
        }
        for c in instance.cover
    ]
    return pd.DataFrame(
        rows, columns=["day", "shift_id", "required", "cost_under", "cost_over"]
    )


def cover_matrix(instance: Instance, field: CoverField = "required") -> np.ndarray:
    """
    Return a (horizon, n_shifts) int array of `field` per day and shift, in
    shift-table order. Pairs without a cover row are 0.

    Cover rows whose day or shift id falls outside the instance are skipped.
    """
    if field not in ("required", "cost_under", "cost_over"):
        raise ValueError("field must be 'required', 'cost_under' or 'cost_over'")
    col = {sid: j for j, sid in enumerate(instance.shift_ids)}
    mat = np.zeros((instance.horizon, len(col)), dtype=int)
    for c in instance.cover:
        j = col.get(c.shift_id)
        if j is None or not (0 <= c.day < instance.horizon):
            continue
        mat[c.day, j] = getattr(c, field)
    return mat


def write_csv_tables(instance: Instance, directory: str | Path) -> list[Path]:
    """Write one CSV per table into `directory` and return the written paths."""
    out_dir = Path(directory).expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)
    on = requests_to_dataframe(instance.shift_on_requests, "on")
    off = requests_to_dataframe(instance.shift_off_requests, "off")
    tables = {
        "shifts": shifts_to_dataframe(instance).assign(
            forbidden_successors=lambda df: df["forbidden_successors"].map("|".join)
        ),
        "staff": staff_to_dataframe(instance),
        "days_off": days_off_to_dataframe(instance),
        "requests": pd.concat([on, off], ignore_index=True),
        "cover": cover_to_dataframe(instance),
    }
    written: list[Path] = []
    for name, df in tables.items():
        path = out_dir / f"{name}.csv"
        df.to_csv(path, index=False)
        written.append(path)
    return written
