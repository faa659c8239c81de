from enum import Enum


class ChainStatus(str, Enum):
    UNKNOWN = "unknown"
    ACTIVE = "active"
    INACTIVE = "inactive"
    DEPRECATED = "deprecated"
