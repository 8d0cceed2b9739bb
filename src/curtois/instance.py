from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Shift:
    """
    A named work period of fixed length (minutes).

    `forbidden_successors` lists the shifts that may not be worked on the day
    after this one, in file order.
    """

    id: str
    length: int
    forbidden_successors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        succ = "|".join(self.forbidden_successors) or "-"
        return f"Shift(id='{self.id}', length={self.length}, no_follow={succ})"


@dataclass(frozen=True, slots=True)
class Staff:
    """
    A staff member and the workload limits of their contract over the horizon.
    """

    id: str
    max_shifts: dict[str, int]
    max_minutes: int
    min_minutes: int
    max_consecutive_shifts: int
    min_consecutive_shifts: int
    min_consecutive_days_off: int
    max_weekends: int

    def max_shifts_of(self, shift_id: str) -> int:
        # shift types missing from the mapping cannot be assigned
        return self.max_shifts.get(shift_id, 0)


@dataclass(frozen=True, slots=True)
class Request:
    """Soft preference for (shift-on) or against (shift-off) a day/shift."""

    staff_id: str
    day: int
    shift_id: str
    weight: int


@dataclass(frozen=True, slots=True)
class Requirement:
    """Target headcount for one day/shift pair with its penalty costs."""

    day: int
    shift_id: str
    required: int
    cost_under: int
    cost_over: int


@dataclass(frozen=True, slots=True)
class Instance:
    """
    A complete rostering instance. Owns every nested collection.
    """

    horizon: int
    shifts: list[Shift] = field(default_factory=list)
    staff: list[Staff] = field(default_factory=list)
    days_off: dict[str, list[int]] = field(default_factory=dict)
    shift_on_requests: list[Request] = field(default_factory=list)
    shift_off_requests: list[Request] = field(default_factory=list)
    cover: list[Requirement] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"Instance(horizon={self.horizon}, shifts={len(self.shifts)}, "
            f"staff={len(self.staff)}, days_off={len(self.days_off)}, "
            f"on_requests={len(self.shift_on_requests)}, "
            f"off_requests={len(self.shift_off_requests)}, "
            f"cover={len(self.cover)})"
        )

    @property
    def shift_ids(self) -> list[str]:
        return [s.id for s in self.shifts]

    @property
    def staff_ids(self) -> list[str]:
        return [s.id for s in self.staff]

    def shift(self, shift_id: str) -> Shift:
        for s in self.shifts:
            if s.id == shift_id:
                return s
        raise KeyError(f"Unknown shift id: {shift_id!r}")

    def staff_member(self, staff_id: str) -> Staff:
        for s in self.staff:
            if s.id == staff_id:
                return s
        raise KeyError(f"Unknown staff id: {staff_id!r}")

    def days_off_for(self, staff_id: str) -> list[int]:
        """Days on which `staff_id` must not work ([] when none are listed)."""
        return list(self.days_off.get(staff_id, []))
