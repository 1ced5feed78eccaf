from typing import Tuple

from .base_demangler import BaseDemangler
from .demangler_type import DemanglerType


class NullDemangler(BaseDemangler):
    """Keeps every name as reported by nm."""

    @staticmethod
    def get_id() -> DemanglerType:
        """IMPORTANT: Stable identifier used in APIs. Do not change once set."""
        return DemanglerType.NONE

    @staticmethod
    def get_name() -> str:
        return "No demangling"

    def demangle(self, mangled: str) -> Tuple[str, bool]:
        return mangled, False
