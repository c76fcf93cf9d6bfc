from enum import StrEnum


class RestrictedViewType(StrEnum):
    NONE = 'NONE'
    MINOR = 'MINOR'
    PARTIAL = 'PARTIAL'
    BLOCKED = 'BLOCKED'  # Most severe: sightline fully obstructed
