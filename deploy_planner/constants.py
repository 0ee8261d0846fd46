"""Global constants for deploy-planner"""

from enum import Enum
import re

APP_NAME = "deploy-planner"
LOG_FORMAT = "%(message)s"

# Project configuration
PROJECT_CONFIG_FILE = ".deploy-planner.yaml"

# Test pairing defaults
DEFAULT_TEST_TYPE = "ApexClass"
DEFAULT_TEST_NAME_PATTERN = r"test$"
DEFAULT_TEST_STRIP_PATTERN = r"_?(unit)?test$"
DEFAULT_SIMILARITY_THRESHOLD = 50  # strict: score must be greater

# Stage index for components that were never placed
UNASSIGNED_STAGE = -1

# Manifest rendering
MANIFEST_ROOT_TAG = "Package"
MANIFEST_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
MANIFEST_TYPE_TAG = "types"
MANIFEST_MEMBER_TAG = "members"
MANIFEST_NAME_TAG = "name"
MANIFEST_VERSION_TAG = "version"
MANIFEST_WILDCARD = "*"
MANIFEST_INDENT = "    "
MANIFEST_ALL_FILE = "package-all.xml"
MANIFEST_GROUP_FILE_PATTERN = "package-group-{index}.xml"

# Remote dependency query field names
EDGE_RECORD_FIELDS = {
    "id": "MetadataComponentId",
    "name": "MetadataComponentName",
    "type": "MetadataComponentType",
    "ref_id": "RefMetadataComponentId",
    "ref_name": "RefMetadataComponentName",
    "ref_type": "RefMetadataComponentType",
}


class ResidualPolicy(Enum):
    """What to do with components left over after staging"""
    REPORT = "report"
    FORCE = "force"
    FAIL = "fail"


class ComponentOption(Enum):
    """Which catalog members end up in manifests"""
    ALL = "all"
    NONE = "none"
    UNMANAGED = "unmanaged"
    WILDCARD_ONLY = "wildcard_only"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DP001"
    INPUT_NOT_FOUND = "DP002"
    INPUT_FORMAT_ERROR = "DP003"
    SCHEMA_VALIDATION_FAILED = "DP004"
    COMPONENT_TYPE_UNDEFINED = "DP005"
    RESIDUAL_CYCLE = "DP006"


# Environment variables
ENV_CONFIG_PATH = "DEPLOY_PLANNER_CONFIG"
ENV_LOG_LEVEL = "DEPLOY_PLANNER_LOG_LEVEL"

# Validation patterns
API_VERSION_PATTERN = re.compile(r"^\d+\.\d+$")

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_WARNING = "⚠"
