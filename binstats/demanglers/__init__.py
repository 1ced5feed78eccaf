"""
Demangler implementations for turning compiler symbol names into signatures
"""
from .demangler_type import DemanglerType
from .base_demangler import BaseDemangler
from .null_demangler import NullDemangler
from .cxxfilt_demangler import CxxFiltDemangler
from .demangler_factory import get_demangler, reset_demangler, set_demangler, DemanglerFactory
