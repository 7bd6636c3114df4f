from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.crud import Resource, build_router
from models.scoping import get_by_id
from core.database import get_db
from core.responses import success
from models.academic_session import AcademicSession
from models.batch import Batch
from models.class_room import ClassRoom
from models.enroll_subject import EnrollSubject
from models.faculty import Faculty
from models.program import Program
from models.section import Section
from models.semester import Semester
from models.subject import Subject
from schemas.academic import (
    AcademicSessionOut,
    BatchOut,
    ClassRoomOut,
    EnrollSubjectOut,
    FacultyOut,
    ProgramOut,
    SectionOut,
    SemesterOut,
    SubjectOut,
)
from services import academic_service
from services.academic_service import clear_other_current, sync_pivots, sync_section_links, write_hooks
from validation.definitions import academic


router = APIRouter()


FACULTIES = Resource(
    model=Faculty,
    definition=academic.FACULTY,
    out=FacultyOut,
    noun="Faculty",
    search_columns=("name", "code", "dean_name"),
    order_by=("sort_order", "name"),
)
PROGRAMS = Resource(
    model=Program,
    definition=academic.PROGRAM,
    out=ProgramOut,
    noun="Program",
    search_columns=("name", "code"),
    filters=("status", "faculty_id", "degree_type"),
    order_by=("sort_order", "name"),
)
BATCHES = Resource(
    model=Batch,
    definition=academic.BATCH,
    out=BatchOut,
    noun="Batch",
    search_columns=("name", "code"),
    filters=("status", "program_id", "academic_year"),
    order_by=("sort_order", "name"),
    after_write=sync_pivots,
)
SECTIONS = Resource(
    model=Section,
    definition=academic.SECTION,
    out=SectionOut,
    noun="Section",
    search_columns=("name",),
    filters=("status", "batch_id"),
    order_by=("sort_order", "name"),
    after_write=sync_section_links,
)
SEMESTERS = Resource(
    model=Semester,
    definition=academic.SEMESTER,
    out=SemesterOut,
    noun="Semester",
    search_columns=("name",),
    filters=("status", "academic_year", "is_current"),
    order_by=("sort_order", "name"),
    after_write=write_hooks(sync_pivots, clear_other_current),
)
SUBJECTS = Resource(
    model=Subject,
    definition=academic.SUBJECT,
    out=SubjectOut,
    noun="Subject",
    search_columns=("name", "code"),
    filters=("status", "subject_type", "class_type"),
    order_by=("name",),
    after_write=sync_pivots,
)
ACADEMIC_SESSIONS = Resource(
    model=AcademicSession,
    definition=academic.ACADEMIC_SESSION,
    out=AcademicSessionOut,
    noun="Academic session",
    search_columns=("name", "code"),
    filters=("status",),
    order_by=("sort_order", "start_date"),
    after_write=write_hooks(sync_pivots, clear_other_current),
)
CLASS_ROOMS = Resource(
    model=ClassRoom,
    definition=academic.CLASS_ROOM,
    out=ClassRoomOut,
    noun="Classroom",
    search_columns=("name", "floor"),
    filters=("status", "room_type"),
    order_by=("name",),
    after_write=sync_pivots,
)
ENROLL_SUBJECTS = Resource(
    model=EnrollSubject,
    definition=academic.ENROLL_SUBJECT,
    out=EnrollSubjectOut,
    noun="Enroll subject",
    filters=("status", "program_id", "semester_id", "section_id"),
    after_write=sync_pivots,
)


@router.post("/academic-sessions/{record_id}/set-current")
def set_current_session(record_id: int, db: Session = Depends(get_db)) -> dict:
    session = get_by_id(db, AcademicSession, record_id)
    if session is None:
        raise HTTPException(status_code=404, detail="ACADEMIC_SESSION_NOT_FOUND")
    session = academic_service.set_current(db, session)
    return success(AcademicSessionOut.model_validate(session).model_dump(mode="json"), "Academic session set as current")


router.include_router(build_router(FACULTIES), prefix="/faculties")
router.include_router(build_router(PROGRAMS), prefix="/programs")
router.include_router(build_router(BATCHES), prefix="/batches")
router.include_router(build_router(SECTIONS), prefix="/sections")
router.include_router(build_router(SEMESTERS), prefix="/semesters")
router.include_router(build_router(SUBJECTS), prefix="/subjects")
router.include_router(build_router(ACADEMIC_SESSIONS), prefix="/academic-sessions")
router.include_router(build_router(CLASS_ROOMS), prefix="/classrooms")
router.include_router(build_router(ENROLL_SUBJECTS), prefix="/enroll-subjects")
