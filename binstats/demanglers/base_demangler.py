from abc import ABC, abstractmethod
from typing import Dict, Iterable, Tuple

from .demangler_type import DemanglerType


class BaseDemangler(ABC):
    @staticmethod
    @abstractmethod
    def get_id() -> DemanglerType:
        """IMPORTANT: Stable identifier used in APIs. Do not change once set."""
        pass

    @staticmethod
    @abstractmethod
    def get_name() -> str:
        pass

    @abstractmethod
    def demangle(self, mangled: str) -> Tuple[str, bool]:
        """
        Demangle a single symbol name.

        Returns:
            Tuple of (demangled name, success). On failure the name is
            returned unchanged and success is False.
        """
        pass

    def demangle_all(self, names: Iterable[str]) -> Dict[str, Tuple[str, bool]]:
        """
        Demangle many names at once, keyed by the input name.

        Demanglers backed by an external program override this to handle
        the whole batch in one run.
        """
        return {name: self.demangle(name) for name in names}
