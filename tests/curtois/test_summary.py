from __future__ import annotations

import io
from pathlib import Path

from curtois.parser import parse_instance, parse_text
from curtois.summary import instance_summary, print_instance_summary


def test_instance_summary_counts(data_dir: Path) -> None:
    s = instance_summary(parse_instance(data_dir / "instance_small.txt"))
    assert s["horizon"] == 14
    assert s["shifts"] == 3
    assert s["staff"] == 3
    assert s["days_off"] == 4
    assert s["shift_on_requests"] == 2
    assert s["shift_on_weight"] == 5
    assert s["shift_off_requests"] == 1
    assert s["required_shifts"] == 6
    assert s["demand_minutes"] == 6 * 480
    assert s["max_minutes_total"] == 4320 + 4320 + 2160


def test_print_summary_reports_capacity(minimal_text: str) -> None:
    buf = io.StringIO()
    print_instance_summary(parse_text(minimal_text), title="minimal", stream=buf)
    out = buf.getvalue()
    assert "Instance minimal" in out
    assert "horizon=7 days" in out
    assert "✅ Max minutes = 2,400 | demand minutes = 960 | OK" in out


def test_print_summary_flags_shortfall(minimal_text: str) -> None:
    text = minimal_text.replace("0,D,2,10,5", "0,D,9,10,5")
    buf = io.StringIO()
    print_instance_summary(parse_text(text), stream=buf)
    assert "NOT OK" in buf.getvalue()
