from enum import Enum


class SortField(str, Enum):
    stars = "stars"
    forks = "forks"
    updated = "updated"
    name = "name"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"
