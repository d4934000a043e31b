from enum import IntEnum, StrEnum


class Environment(IntEnum):
    PRODUCTION = 1
    STAGING = 2


class Speed(IntEnum):
    PRIORITY = 1
    ECONOMY = 2


class PrintColor(IntEnum):
    BLACK = 0
    COLOR = 1


class SortType(StrEnum):
    ASC = "asc"
    DESC = "desc"


BASE_URLS: dict[Environment, str] = {
    Environment.PRODUCTION: "https://api.pingen.com",
    Environment.STAGING: "https://stage-api.pingen.com",
}
