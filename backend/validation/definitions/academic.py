from __future__ import annotations

from validation.definitions.common import (
    id_list_rules,
    slug_from,
    sort_order_rules,
    status_rules,
    unique_slug,
)
from validation.mode import OperationMode, excluded_id
from validation.queries import exists_matching
from validation.rules import (
    After,
    Array,
    Boolean,
    Date,
    Email,
    Exists,
    FieldRules,
    Integer,
    Lte,
    Max,
    Min,
    Nullable,
    Numeric,
    OneOf,
    String,
    Unique,
    presence,
    rules_for,
)
from validation.validator import HookContext, RequestDefinition
from models.enums import ClassType, DegreeType, RoomType, Status, SubjectType


def _faculty_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("name", *presence(mode), String(), Max(255), Unique("faculties")),
        rules_for("code", *presence(mode), String(), Max(50), Unique("faculties")),
        rules_for("description", Nullable(), String(), Max(1000)),
        rules_for("dean_name", Nullable(), String(), Max(255)),
        rules_for("dean_email", Nullable(), String(), Email(), Max(255)),
        rules_for("dean_phone", Nullable(), String(), Max(20)),
        status_rules(Status),
        sort_order_rules(),
    ]


FACULTY = RequestDefinition(
    name="faculty",
    table="faculties",
    rules=_faculty_rules,
    messages={
        "name.required": "The faculty name is required.",
        "name.unique": "A faculty with this name already exists.",
        "code.required": "The faculty code is required.",
        "code.unique": "A faculty with this code already exists.",
        "code.max": "The faculty code cannot exceed 50 characters.",
        "dean_email.email": "Please provide a valid email address for the dean.",
        "status.enum": "The status must be either active or inactive.",
    },
    attributes={
        "name": "faculty name",
        "code": "faculty code",
        "dean_name": "dean name",
        "dean_email": "dean email",
        "dean_phone": "dean phone",
    },
    defaults={"status": Status.ACTIVE.value, "sort_order": 0},
    audited=True,
    derive=slug_from("name"),
    hooks=(unique_slug("faculties", "name"),),
)


def _program_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("faculty_id", *presence(mode), Integer(), Exists("faculties")),
        rules_for("name", *presence(mode), String(), Max(255), Unique("programs")),
        rules_for("code", *presence(mode), String(), Max(50), Unique("programs")),
        rules_for("description", Nullable(), String(), Max(1000)),
        rules_for("duration_years", *presence(mode), Integer(), Min(1), Max(10)),
        rules_for("total_credits", *presence(mode), Integer(), Min(1), Max(200)),
        rules_for("fee_amount", Nullable(), Numeric(), Min(0)),
        rules_for("degree_type", *presence(mode), String(), OneOf(DegreeType)),
        rules_for("admission_requirements", Nullable(), String(), Max(1000)),
        rules_for("is_registration_open", Nullable(), Boolean()),
        status_rules(Status),
        sort_order_rules(),
    ]


PROGRAM = RequestDefinition(
    name="program",
    table="programs",
    rules=_program_rules,
    messages={
        "faculty_id.required": "Please select a faculty.",
        "faculty_id.exists": "The selected faculty does not exist.",
        "name.required": "The program name is required.",
        "name.unique": "A program with this name already exists.",
        "code.required": "The program code is required.",
        "code.unique": "A program with this code already exists.",
        "duration_years.min": "The program duration must be at least 1 year.",
        "duration_years.max": "The program duration cannot exceed 10 years.",
        "total_credits.min": "The total credits must be at least 1.",
        "total_credits.max": "The total credits cannot exceed 200.",
        "degree_type.enum": "Please select a valid degree type.",
    },
    attributes={
        "name": "program name",
        "code": "program code",
        "duration_years": "duration (years)",
        "total_credits": "total credits",
        "degree_type": "degree type",
        "admission_requirements": "admission requirements",
        "is_registration_open": "registration status",
    },
    defaults={"status": Status.ACTIVE.value, "is_registration_open": True, "sort_order": 0},
    audited=True,
    derive=slug_from("name"),
    hooks=(unique_slug("programs", "name"),),
)


def _batch_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("program_id", *presence(mode), Integer(), Exists("programs")),
        rules_for("name", *presence(mode), String(), Max(255), Unique("batches")),
        rules_for("code", *presence(mode), String(), Max(50), Unique("batches")),
        rules_for("academic_year", *presence(mode), Integer(), Min(2020), Max(2030)),
        rules_for("start_date", *presence(mode), Date()),
        rules_for("end_date", *presence(mode), Date(), After("start_date")),
        rules_for("max_students", Nullable(), Integer(), Min(1), Max(1000)),
        rules_for("description", Nullable(), String(), Max(1000)),
        *id_list_rules("programs", "programs"),
        status_rules(Status),
        sort_order_rules(),
    ]


BATCH = RequestDefinition(
    name="batch",
    table="batches",
    rules=_batch_rules,
    messages={
        "program_id.required": "The program is required.",
        "program_id.integer": "The program must be a valid integer.",
        "program_id.exists": "The selected program does not exist.",
        "name.required": "The batch name is required.",
        "name.max": "The batch name cannot exceed 255 characters.",
        "name.unique": "This batch name is already registered.",
        "code.required": "The batch code is required.",
        "code.max": "The batch code cannot exceed 50 characters.",
        "code.unique": "This batch code is already registered.",
        "academic_year.min": "The academic year must be at least 2020.",
        "academic_year.max": "The academic year cannot exceed 2030.",
        "start_date.date": "The start date must be a valid date.",
        "end_date.date": "The end date must be a valid date.",
        "end_date.after": "The end date must be after the start date.",
        "max_students.min": "The maximum students must be at least 1.",
        "max_students.max": "The maximum students cannot exceed 1000.",
        "status.enum": "The status must be a valid batch status.",
        "sort_order.min": "The sort order must be at least 0.",
    },
    attributes={
        "program_id": "program",
        "name": "batch name",
        "code": "batch code",
        "academic_year": "academic year",
        "start_date": "start date",
        "end_date": "end date",
        "max_students": "maximum students",
        "description": "batch description",
        "status": "batch status",
        "sort_order": "sort order",
        "programs.*": "program",
    },
    defaults={"status": Status.ACTIVE.value, "sort_order": 0},
    audited=True,
)


def _section_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("batch_id", *presence(mode), Integer(), Exists("batches")),
        rules_for("name", *presence(mode), String(), Max(255), Unique("sections", scope="batch_id")),
        rules_for("seat", Nullable(), Integer(), Min(1), Max(100)),
        rules_for("description", Nullable(), String(), Max(1000)),
        *id_list_rules("programs", "programs"),
        *id_list_rules("semesters", "semesters"),
        status_rules(Status),
        sort_order_rules(),
    ]


def _paired_relationships(ctx: HookContext) -> None:
    # Each program is linked to the semester at the same position.
    if not (ctx.passed("programs") and ctx.passed("semesters")):
        return
    programs = ctx.data.get("programs") or []
    semesters = ctx.data.get("semesters") or []
    if len(programs) != len(semesters):
        ctx.fail("relationships", "relationships")


SECTION = RequestDefinition(
    name="section",
    table="sections",
    rules=_section_rules,
    messages={
        "batch_id.required": "Please select a batch.",
        "batch_id.exists": "The selected batch does not exist.",
        "name.required": "The section name is required.",
        "name.unique": "This section name is already used in the selected batch.",
        "seat.min": "The number of seats must be at least 1.",
        "seat.max": "The number of seats cannot exceed 100.",
        "programs.*.exists": "One or more selected programs do not exist.",
        "semesters.*.exists": "One or more selected semesters do not exist.",
        "relationships": "Each program must be paired with exactly one semester.",
    },
    attributes={
        "name": "section name",
        "seat": "number of seats",
        "programs.*": "program",
        "semesters.*": "semester",
    },
    defaults={"status": Status.ACTIVE.value, "sort_order": 0},
    audited=True,
    hooks=(_paired_relationships,),
)


def _semester_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("name", *presence(mode), String(), Max(255), Unique("semesters")),
        rules_for("academic_year", *presence(mode), Integer(), Min(2020), Max(2030)),
        rules_for("start_date", *presence(mode), Date()),
        rules_for("end_date", *presence(mode), Date(), After("start_date")),
        rules_for("is_current", Nullable(), Boolean()),
        *id_list_rules("programs", "programs"),
        rules_for("description", Nullable(), String(), Max(1000)),
        status_rules(Status),
        sort_order_rules(),
    ]


SEMESTER = RequestDefinition(
    name="semester",
    table="semesters",
    rules=_semester_rules,
    messages={
        "name.required": "The semester name is required.",
        "name.unique": "A semester with this name already exists.",
        "academic_year.min": "The academic year must be at least 2020.",
        "academic_year.max": "The academic year cannot exceed 2030.",
        "end_date.after": "The end date must be after the start date.",
        "programs.*.exists": "One or more selected programs do not exist.",
    },
    attributes={
        "name": "semester name",
        "academic_year": "academic year",
        "start_date": "start date",
        "end_date": "end date",
        "is_current": "current semester",
        "programs.*": "program",
    },
    defaults={"status": Status.ACTIVE.value, "is_current": False, "sort_order": 0},
    audited=True,
)


def _subject_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("name", *presence(mode), String(), Max(255), Unique("subjects")),
        rules_for("code", *presence(mode), String(), Max(50), Unique("subjects")),
        rules_for("credit_hours", *presence(mode), Integer(), Min(1), Max(10)),
        rules_for("subject_type", *presence(mode), String(), OneOf(SubjectType)),
        rules_for("class_type", *presence(mode), String(), OneOf(ClassType)),
        *id_list_rules("programs", "programs"),
        rules_for("total_marks", Nullable(), Numeric(), Min(0), Max(1000)),
        rules_for("passing_marks", Nullable(), Numeric(), Min(0), Max(1000), Lte("total_marks")),
        rules_for("description", Nullable(), String(), Max(1000)),
        rules_for("learning_outcomes", Nullable(), String(), Max(2000)),
        rules_for("prerequisites", Nullable(), String(), Max(500)),
        status_rules(Status),
    ]


SUBJECT = RequestDefinition(
    name="subject",
    table="subjects",
    rules=_subject_rules,
    messages={
        "name.required": "The subject name is required.",
        "name.unique": "A subject with this name already exists.",
        "code.required": "The subject code is required.",
        "code.unique": "A subject with this code already exists.",
        "credit_hours.min": "Credit hours must be at least 1.",
        "credit_hours.max": "Credit hours cannot exceed 10.",
        "subject_type.enum": "Please select a valid subject type.",
        "class_type.enum": "Please select a valid class type.",
        "passing_marks.lte": "The passing marks cannot exceed the total marks.",
        "programs.*.exists": "One or more selected programs do not exist.",
    },
    attributes={
        "name": "subject name",
        "code": "subject code",
        "credit_hours": "credit hours",
        "subject_type": "subject type",
        "class_type": "class type",
        "total_marks": "total marks",
        "passing_marks": "passing marks",
        "learning_outcomes": "learning outcomes",
        "programs.*": "program",
    },
    defaults={"status": Status.ACTIVE.value},
    audited=True,
)


def _academic_session_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("name", *presence(mode), String(), Max(255), Unique("academic_sessions")),
        rules_for("code", *presence(mode), String(), Max(50), Unique("academic_sessions")),
        rules_for("start_date", *presence(mode), Date()),
        rules_for("end_date", *presence(mode), Date(), After("start_date")),
        rules_for("is_current", Nullable(), Boolean()),
        *id_list_rules("programs", "programs"),
        rules_for("description", Nullable(), String(), Max(1000)),
        status_rules(Status),
        sort_order_rules(),
    ]


ACADEMIC_SESSION = RequestDefinition(
    name="academic_session",
    table="academic_sessions",
    rules=_academic_session_rules,
    messages={
        "name.required": "The session name is required.",
        "name.unique": "An academic session with this name already exists.",
        "code.required": "The session code is required.",
        "code.unique": "An academic session with this code already exists.",
        "end_date.after": "The end date must be after the start date.",
        "programs.*.exists": "One or more selected programs do not exist.",
    },
    attributes={
        "name": "session name",
        "code": "session code",
        "start_date": "start date",
        "end_date": "end date",
        "is_current": "current session",
        "programs.*": "program",
    },
    defaults={"status": Status.ACTIVE.value, "is_current": False, "sort_order": 0},
    audited=True,
)


def _class_room_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("name", *presence(mode), String(), Max(255), Unique("class_rooms")),
        rules_for("floor", Nullable(), String(), Max(50)),
        rules_for("capacity", *presence(mode), Integer(), Min(1), Max(1000)),
        rules_for("room_type", *presence(mode), String(), OneOf(RoomType)),
        *id_list_rules("programs", "programs"),
        rules_for("description", Nullable(), String(), Max(1000)),
        rules_for("facilities", Nullable(), Array()),
        rules_for("facilities.*", String(), Max(100)),
        rules_for("is_available", Nullable(), Boolean()),
        status_rules(Status),
    ]


CLASS_ROOM = RequestDefinition(
    name="class_room",
    table="class_rooms",
    rules=_class_room_rules,
    messages={
        "name.required": "The classroom name is required.",
        "name.unique": "A classroom with this name already exists.",
        "capacity.min": "The capacity must be at least 1.",
        "capacity.max": "The capacity cannot exceed 1000.",
        "room_type.enum": "Please select a valid room type.",
        "facilities.*.max": "Each facility cannot exceed 100 characters.",
    },
    attributes={
        "name": "classroom name",
        "room_type": "room type",
        "is_available": "availability",
        "programs.*": "program",
        "facilities.*": "facility",
    },
    defaults={"status": Status.ACTIVE.value, "is_available": True},
    audited=True,
)


_COMBINATION = ("program_id", "semester_id", "section_id")


def _enroll_subject_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("program_id", *presence(mode), Integer(), Exists("programs")),
        rules_for("semester_id", *presence(mode), Integer(), Exists("semesters")),
        rules_for("section_id", *presence(mode), Integer(), Exists("sections")),
        rules_for("subjects", *presence(mode), Array(), Min(1)),
        rules_for("subjects.*", Integer(), Exists("subjects")),
        status_rules(Status),
    ]


def _unique_combination(ctx: HookContext) -> None:
    if not all(ctx.passed(k) for k in _COMBINATION):
        return
    criteria = {k: ctx.value(k) for k in _COMBINATION}
    if any(v is None for v in criteria.values()):
        return
    if exists_matching(ctx.db, "enroll_subjects", criteria, exclude_id=excluded_id(ctx.mode)):
        ctx.fail("combination", "combination")


ENROLL_SUBJECT = RequestDefinition(
    name="enroll_subject",
    table="enroll_subjects",
    rules=_enroll_subject_rules,
    messages={
        "program_id.required": "Please select a program.",
        "program_id.exists": "The selected program does not exist.",
        "semester_id.required": "Please select a semester.",
        "semester_id.exists": "The selected semester does not exist.",
        "section_id.required": "Please select a section.",
        "section_id.exists": "The selected section does not exist.",
        "subjects.required": "Please select at least one subject.",
        "subjects.min": "Please select at least one subject.",
        "subjects.*.exists": "One or more selected subjects do not exist.",
        "combination": "Subjects are already enrolled for this program, semester and section.",
    },
    attributes={
        "semester_id": "semester",
        "section_id": "section",
        "subjects.*": "subject",
    },
    defaults={"status": Status.ACTIVE.value},
    audited=True,
    hooks=(_unique_combination,),
)


DEFINITIONS = (
    FACULTY,
    PROGRAM,
    BATCH,
    SECTION,
    SEMESTER,
    SUBJECT,
    ACADEMIC_SESSION,
    CLASS_ROOM,
    ENROLL_SUBJECT,
)
