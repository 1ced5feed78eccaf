from .demanglers.demangler_type import DemanglerType


# Demangler used for ALL reads - change this to switch demanglers
DEMANGLER_TYPE = DemanglerType.CXXFILT

# Number base of the address and size columns (nm -t d)
DEFAULT_RADIX = 10
