from models.user import User
from models.faculty import Faculty
from models.program import Program
from models.batch import Batch
from models.section import Section
from models.semester import Semester
from models.subject import Subject
from models.academic_session import AcademicSession
from models.class_room import ClassRoom
from models.enroll_subject import EnrollSubject
from models.student import Application, Student, StudentEnroll
from models.book_category import BookCategory
from models.book import Book
from models.book_request import BookRequest
from models.library_member import LibraryMember
from models.issue_return import IssueReturn
from models.fee import Fee, FeesCategory
from models.polymorphic import Content, Document, Notice
from models.settings import (
	ApplicationSetting,
	IdCardSetting,
	LibrarySetting,
	MailSetting,
	PrintSetting,
	ScheduleSetting,
	SmsSetting,
	SocialSetting,
	TaxSetting,
	TopbarSetting,
)
from models import associations

__all__ = [
	"User",
	"Faculty",
	"Program",
	"Batch",
	"Section",
	"Semester",
	"Subject",
	"AcademicSession",
	"ClassRoom",
	"EnrollSubject",
	"Application",
	"Student",
	"StudentEnroll",
	"BookCategory",
	"Book",
	"BookRequest",
	"LibraryMember",
	"IssueReturn",
	"Fee",
	"FeesCategory",
	"Content",
	"Document",
	"Notice",
	"ApplicationSetting",
	"IdCardSetting",
	"LibrarySetting",
	"MailSetting",
	"PrintSetting",
	"ScheduleSetting",
	"SmsSetting",
	"SocialSetting",
	"TaxSetting",
	"TopbarSetting",
	"associations",
]
