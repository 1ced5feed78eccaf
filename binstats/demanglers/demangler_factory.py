from typing import List, Dict, Any, Optional

from .demangler_type import DemanglerType
from .base_demangler import BaseDemangler
from .cxxfilt_demangler import CxxFiltDemangler
from .null_demangler import NullDemangler
from .. import config


# Singleton instance cache
_demangler_instance = None
_demangler_type: Optional[DemanglerType] = None  # None selects config.DEMANGLER_TYPE


def get_demangler() -> BaseDemangler:
    """Get the configured demangler instance.

    Returns the appropriate demangler based on the configured demangler type.
    This is the ONLY place in the codebase that should branch on demangler type.
    """
    global _demangler_instance

    if _demangler_instance is not None:
        return _demangler_instance

    demangler_type = _demangler_type or config.DEMANGLER_TYPE

    if demangler_type == DemanglerType.CXXFILT:
        _demangler_instance = CxxFiltDemangler()
    elif demangler_type == DemanglerType.NONE:
        _demangler_instance = NullDemangler()
    else:
        raise ValueError(f"Unsupported demangler type: {demangler_type}")

    return _demangler_instance


def reset_demangler():
    """Reset demangler instance (for testing only)."""
    global _demangler_instance, _demangler_type
    _demangler_instance = None
    _demangler_type = None


def set_demangler(demangler_id: str):
    """Set the active demangler by ID.

    Args:
        demangler_id: Demangler ID string ('cxxfilt' or 'none')

    Raises:
        ValueError: If demangler_id is not recognized
    """
    global _demangler_type, _demangler_instance

    try:
        _demangler_type = DemanglerType(demangler_id)
    except ValueError:
        raise ValueError(f"Unknown demangler ID: {demangler_id}. Valid options: {[dt.value for dt in DemanglerType]}")

    # Reset singleton to force re-creation with new type
    _demangler_instance = None


class DemanglerFactory:
    @staticmethod
    def get_available_demanglers() -> List[Dict[str, Any]]:
        return [
            {'id': CxxFiltDemangler.get_id().value, 'name': CxxFiltDemangler.get_name()},
            {'id': NullDemangler.get_id().value, 'name': NullDemangler.get_name()},
        ]
