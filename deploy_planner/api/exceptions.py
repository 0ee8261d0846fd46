"""Exception definitions for deploy-planner API"""

from ..constants import ErrorCode


class PlannerError(Exception):
    """Base exception for deploy-planner"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(PlannerError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(PlannerError):
    """Input document failed schema validation"""

    def __init__(self, message: str, errors=None):
        super().__init__(message, ErrorCode.SCHEMA_VALIDATION_FAILED)
        self.errors = list(errors or [])


class InputError(PlannerError):
    """Input file missing or unreadable"""

    def __init__(self, message: str, error_code: str = ErrorCode.INPUT_FORMAT_ERROR):
        super().__init__(message, error_code)


class UnknownTypeError(PlannerError):
    """Component references a type the catalog does not declare"""

    def __init__(self, type_name: str, member_key: str = None):
        if member_key:
            message = f"Unknown component type '{type_name}' for member '{member_key}'"
        else:
            message = f"Unknown component type '{type_name}'"
        super().__init__(message, ErrorCode.COMPONENT_TYPE_UNDEFINED)
        self.type_name = type_name
        self.member_key = member_key


class ResidualCycleError(PlannerError):
    """Components could not be staged because of cycles longer than two"""

    def __init__(self, residual):
        self.residual = list(residual)
        names = ", ".join(f'{r.type}:{r.name}' for r in self.residual[:5])
        if len(self.residual) > 5:
            names += f" (+{len(self.residual) - 5} more)"
        message = f"{len(self.residual)} component(s) left unstaged by dependency cycles: {names}"
        super().__init__(message, ErrorCode.RESIDUAL_CYCLE)
