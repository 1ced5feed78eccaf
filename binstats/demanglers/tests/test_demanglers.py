import subprocess
import pytest
from unittest.mock import patch
from binstats.demanglers import (
    BaseDemangler,
    CxxFiltDemangler,
    DemanglerFactory,
    DemanglerType,
    NullDemangler,
    get_demangler,
    reset_demangler,
    set_demangler,
)


def _completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestNullDemangler:
    def test_get_id_returns_stable_identifier(self):
        assert NullDemangler.get_id() == DemanglerType.NONE

    def test_demangle_always_fails(self):
        assert NullDemangler().demangle("_Z3foov") == ("_Z3foov", False)

    def test_is_base_demangler(self):
        assert isinstance(NullDemangler(), BaseDemangler)


class TestCxxFiltDemangler:
    def test_get_id_returns_stable_identifier(self):
        assert CxxFiltDemangler.get_id() == DemanglerType.CXXFILT

    def test_get_name_returns_human_readable_name(self):
        assert CxxFiltDemangler.get_name() == "GNU c++filt"

    def test_path_defaults_to_tool_config(self):
        demangler = CxxFiltDemangler()
        assert demangler.cxxfilt_path == "c++filt"

    def test_demangle_success(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("foo(int)\n")) as run:
            assert demangler.demangle("_Z3fooi") == ("foo(int)", True)
        assert run.call_args[0][0] == ["c++filt"]
        assert run.call_args[1]["input"] == "_Z3fooi\n"

    def test_unchanged_output_is_failure(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("main\n")):
            assert demangler.demangle("main") == ("main", False)

    def test_non_zero_exit_is_failure(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("", returncode=1, stderr="bad")), \
                patch("binstats.logger.error") as log_error:
            assert demangler.demangle("_Z3fooi") == ("_Z3fooi", False)
        assert log_error.call_count == 2

    def test_results_are_cached(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("foo()\n")) as run:
            demangler.demangle("_Z3foov")
            demangler.demangle("_Z3foov")
        assert run.call_count == 1

    def test_empty_name_is_not_demangled(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run") as run:
            assert demangler.demangle("") == ("", False)
        run.assert_not_called()

    def test_missing_executable_disables_demangling(self):
        demangler = CxxFiltDemangler("does-not-exist-c++filt")
        with patch("subprocess.run", side_effect=FileNotFoundError) as run:
            assert demangler.demangle("_Z3foov") == ("_Z3foov", False)
            assert demangler.demangle("_Z3barv") == ("_Z3barv", False)
        assert run.call_count == 1


class TestCxxFiltBatch:
    def test_batch_uses_single_process(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("foo()\nmain\nbar(int)\n")) as run:
            result = demangler.demangle_all(["_Z3foov", "main", "_Z3bari"])
        assert run.call_count == 1
        assert run.call_args[1]["input"] == "_Z3foov\nmain\n_Z3bari\n"
        assert result == {
            "_Z3foov": ("foo()", True),
            "main": ("main", False),
            "_Z3bari": ("bar(int)", True),
        }

    def test_duplicates_and_cached_names_are_not_resent(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("foo()\n")):
            demangler.demangle("_Z3foov")
        with patch("subprocess.run", return_value=_completed("bar()\n")) as run:
            demangler.demangle_all(["_Z3foov", "_Z3barv", "_Z3barv"])
        assert run.call_args[1]["input"] == "_Z3barv\n"

    def test_line_count_mismatch_is_failure(self):
        demangler = CxxFiltDemangler("c++filt")
        with patch("subprocess.run", return_value=_completed("foo()\n")) as run:
            result = demangler.demangle_all(["_Z3foov", "_Z3barv"])
            demangler.demangle("_Z3barv")
        assert result["_Z3foov"] == ("_Z3foov", False)
        assert run.call_count == 1

    def test_null_demangler_batch(self):
        assert NullDemangler().demangle_all(["a", "b"]) == {"a": ("a", False), "b": ("b", False)}


class TestDemanglerFactory:
    def setup_method(self):
        reset_demangler()

    def teardown_method(self):
        reset_demangler()

    def test_set_demangler_none(self):
        set_demangler('none')
        assert isinstance(get_demangler(), NullDemangler)

    def test_set_demangler_cxxfilt(self):
        set_demangler('cxxfilt')
        assert isinstance(get_demangler(), CxxFiltDemangler)

    def test_get_demangler_returns_singleton(self):
        set_demangler('none')
        assert get_demangler() is get_demangler()

    def test_default_follows_config(self):
        with patch("binstats.config.DEMANGLER_TYPE", DemanglerType.NONE):
            assert isinstance(get_demangler(), NullDemangler)

    def test_unknown_id_raises_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            set_demangler('llvm')
        assert "Unknown demangler ID" in str(exc_info.value)

    def test_available_demanglers(self):
        ids = [d['id'] for d in DemanglerFactory.get_available_demanglers()]
        assert ids == ['cxxfilt', 'none']
