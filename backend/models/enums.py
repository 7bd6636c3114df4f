from __future__ import annotations

from enum import Enum
from typing import Any


class ChoiceEnum(str, Enum):
    """A closed set of string values with display labels.

    Members compare equal to their raw value, so ``Status.ACTIVE == "active"``.
    """

    @classmethod
    def values(cls) -> list[str]:
        return [m.value for m in cls]

    @classmethod
    def has_value(cls, value: Any) -> bool:
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value in cls._value2member_map_

    @classmethod
    def options(cls) -> list[dict[str, str]]:
        return [{"value": m.value, "label": m.label} for m in cls]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Status(ChoiceEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ApplicationStatus(ChoiceEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    REJECTED = "rejected"
    ADMITTED = "admitted"


class BloodGroup(ChoiceEnum):
    A_POSITIVE = "a_positive"
    A_NEGATIVE = "a_negative"
    B_POSITIVE = "b_positive"
    B_NEGATIVE = "b_negative"
    AB_POSITIVE = "ab_positive"
    AB_NEGATIVE = "ab_negative"
    O_POSITIVE = "o_positive"
    O_NEGATIVE = "o_negative"

    @property
    def label(self) -> str:
        group, sign = self.value.rsplit("_", 1)
        return group.upper() + ("+" if sign == "positive" else "-")


class BookStatus(ChoiceEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class BookCategoryStatus(ChoiceEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class BookRequestStatus(ChoiceEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    REJECTED = "rejected"


class ClassType(ChoiceEnum):
    THEORY = "theory"
    PRACTICAL = "practical"
    BOTH = "both"


class DegreeType(ChoiceEnum):
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"
    DIPLOMA = "diploma"
    CERTIFICATE = "certificate"

    @property
    def label(self) -> str:
        return "PhD" if self is DegreeType.PHD else self.value.title()


class FeeStatus(ChoiceEnum):
    UNPAID = "unpaid"
    PAID = "paid"
    PARTIAL = "partial"


class Gender(ChoiceEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class IssueStatus(ChoiceEnum):
    ISSUED = "issued"
    RETURNED = "returned"
    LOST = "lost"


class MaritalStatus(ChoiceEnum):
    SINGLE = "single"
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"
    SEPARATED = "separated"


class MemberType(ChoiceEnum):
    STUDENT = "student"
    STAFF = "staff"


class Religion(ChoiceEnum):
    CHRISTIANITY = "christianity"
    ISLAM = "islam"
    TRADITIONAL = "traditional"
    OTHER = "other"
    NONE = "none"


class RoomType(ChoiceEnum):
    CLASSROOM = "classroom"
    LAB = "lab"
    LIBRARY = "library"
    AUDITORIUM = "auditorium"
    CONFERENCE = "conference"


class SubjectType(ChoiceEnum):
    COMPULSORY = "compulsory"
    OPTIONAL = "optional"
    ELECTIVE = "elective"
