from enum import StrEnum


class GridOverflowPolicy(StrEnum):
    REJECT = 'reject'
    EXPAND = 'expand'
