from enum import Enum


class DemanglerType(Enum):
    CXXFILT = 'cxxfilt'
    NONE = 'none'
