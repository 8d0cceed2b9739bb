from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from curtois.frames import (
    cover_matrix,
    cover_to_dataframe,
    days_off_to_dataframe,
    requests_to_dataframe,
    shifts_to_dataframe,
    staff_to_dataframe,
    write_csv_tables,
)
from curtois.instance import Instance, Shift, Staff
from curtois.parser import parse_instance


@pytest.fixture
def small(data_dir: Path):
    return parse_instance(data_dir / "instance_small.txt")


def test_shifts_frame(small) -> None:
    df = shifts_to_dataframe(small)
    assert list(df["shift_id"]) == ["E", "D", "L"]
    assert df.loc[2, "forbidden_successors"] == ["E", "D"]


def test_staff_frame_has_one_column_per_shift(small) -> None:
    df = staff_to_dataframe(small)
    assert df.shape == (3, 8 + 3)
    row = df.set_index("staff_id").loc["A"]
    assert row["maxshifts_E"] == 14
    assert row["maxshifts_L"] == 0
    assert row["days_off"] == 1


def test_days_off_long_form(small) -> None:
    df = days_off_to_dataframe(small)
    assert list(df.itertuples(index=False, name=None)) == [
        ("A", 0),
        ("B", 5),
        ("B", 9),
        ("B", 12),
    ]


def test_requests_frame(small) -> None:
    df = requests_to_dataframe(small.shift_on_requests, "on")
    assert list(df.columns) == ["staff_id", "day", "shift_id", "weight", "kind"]
    assert (df["kind"] == "on").all()
    assert requests_to_dataframe([], "off").empty


def test_cover_frame_and_matrix(small) -> None:
    df = cover_to_dataframe(small)
    assert len(df) == 6
    mat = cover_matrix(small)
    assert mat.shape == (14, 3)
    assert mat[0].tolist() == [1, 2, 1]
    assert mat[1].tolist() == [1, 1, 0]
    assert not mat[2:].any()
    assert np.all(cover_matrix(small, "cost_under")[:2] == 100)


def test_cover_matrix_rejects_unknown_field(small) -> None:
    with pytest.raises(ValueError):
        cover_matrix(small, "weight")  # type: ignore[arg-type]


def test_write_csv_tables(small, tmp_path: Path) -> None:
    written = write_csv_tables(small, tmp_path / "out")
    assert sorted(p.name for p in written) == [
        "cover.csv",
        "days_off.csv",
        "requests.csv",
        "shifts.csv",
        "staff.csv",
    ]
    shifts = pd.read_csv(tmp_path / "out" / "shifts.csv", keep_default_na=False)
    assert list(shifts["forbidden_successors"]) == ["", "E", "E|D"]
    requests = pd.read_csv(tmp_path / "out" / "requests.csv")
    assert list(requests["kind"]) == ["on", "on", "off"]


def test_staff_frame_shift_columns_do_not_shadow_limits() -> None:
    inst = Instance(
        horizon=1,
        shifts=[Shift("minutes", 480)],
        staff=[Staff("A", {"minutes": 3}, 2400, 0, 5, 1, 1, 1)],
    )
    df = staff_to_dataframe(inst)
    assert df.loc[0, "max_minutes"] == 2400
    assert df.loc[0, "maxshifts_minutes"] == 3
