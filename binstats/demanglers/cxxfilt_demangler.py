import subprocess
from typing import Dict, Iterable, List, Optional, Tuple

from .base_demangler import BaseDemangler
from .demangler_type import DemanglerType
from .. import logger
from ..tool_config import ToolConfig


class CxxFiltDemangler(BaseDemangler):
    """
    Demangles C++ symbol names with the binutils c++filt program.

    Names are piped through c++filt on stdin, one per line, so a whole nm
    dump costs a single process. c++filt echoes names it cannot demangle,
    so an unchanged result counts as a failure. Results are cached per name
    because the same mangled name shows up for every clone of a function.
    """

    def __init__(self, cxxfilt_path: Optional[str] = None):
        logger.info("Initializing CxxFiltDemangler")
        if cxxfilt_path is None:
            cxxfilt_path = ToolConfig().cxxfilt_path
        self.cxxfilt_path = cxxfilt_path
        self._cache: Dict[str, Tuple[str, bool]] = {}
        self._available = True

    @staticmethod
    def get_id() -> DemanglerType:
        """IMPORTANT: Stable identifier used in APIs. Do not change once set."""
        return DemanglerType.CXXFILT

    @staticmethod
    def get_name() -> str:
        return "GNU c++filt"

    def _run_cxxfilt(self, names: List[str]) -> Optional[List[str]]:
        """Demangled output lines for names, or None if c++filt failed."""
        try:
            result = subprocess.run(
                [self.cxxfilt_path],
                input='\n'.join(names) + '\n',
                capture_output=True,
                text=True,
                check=False
            )
        except FileNotFoundError:
            logger.warning(f"c++filt not found at {self.cxxfilt_path}, symbols stay mangled")
            self._available = False
            return None

        if result.returncode != 0:
            logger.error(f"c++filt failed with return code {result.returncode}")
            logger.error(f"stderr: {result.stderr}")
            return None

        lines = result.stdout.splitlines()
        if len(lines) != len(names):
            logger.error(f"c++filt returned {len(lines)} lines for {len(names)} names")
            return None
        return lines

    def demangle_all(self, names: Iterable[str]) -> Dict[str, Tuple[str, bool]]:
        names = list(names)
        pending = [name for name in dict.fromkeys(names) if name and name not in self._cache]

        if pending and self._available:
            logger.debug(f"Demangling {len(pending)} names with c++filt")
            outputs = self._run_cxxfilt(pending)
            if outputs is None:
                outputs = pending
            for mangled, output in zip(pending, outputs):
                output = output.strip()
                if output and output != mangled:
                    self._cache[mangled] = (output, True)
                else:
                    self._cache[mangled] = (mangled, False)

        return {name: self._cache.get(name, (name, False)) for name in names}

    def demangle(self, mangled: str) -> Tuple[str, bool]:
        return self.demangle_all([mangled])[mangled]
