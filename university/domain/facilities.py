"""
Facility Models

Classrooms and the course schedule (course code → time slot and room).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from university.domain.base import Record


class Classroom(Record):
    room_number: str
    capacity: int

    @field_validator("capacity")
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Capacity must be positive.")
        return v


class ScheduleSlot(BaseModel):
    """Immutable time slot and room for one course."""

    model_config = ConfigDict(frozen=True)

    time_slot: str
    room: str


class Schedule(Record):
    """Course schedule. Scheduling a course again replaces its slot."""

    entries: dict[str, ScheduleSlot] = Field(default_factory=dict)

    def add_schedule(self, course_code: str, time_slot: str, room: str) -> None:
        self.entries[course_code] = ScheduleSlot(time_slot=time_slot, room=room)

    def get_schedule(self, course_code: str) -> ScheduleSlot | None:
        return self.entries.get(course_code)
