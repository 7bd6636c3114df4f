from validation.mode import Create, OperationMode, Update, mode_from_method
from validation.queries import exists_conflicting
from validation.validator import (
	RequestDefinition,
	ValidationFailed,
	ValidationResult,
	build_rules,
	validate,
	validate_or_raise,
)

__all__ = [
	"Create",
	"OperationMode",
	"Update",
	"mode_from_method",
	"exists_conflicting",
	"RequestDefinition",
	"ValidationFailed",
	"ValidationResult",
	"build_rules",
	"validate",
	"validate_or_raise",
]
