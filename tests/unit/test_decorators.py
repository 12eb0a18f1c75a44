#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for md2html.utils.decorators and md2html.utils.packages."""

import logging

import pytest

from md2html.exceptions import DependencyError
from md2html.utils.decorators import debug_timer, requires_dependencies
from md2html.utils.packages import check_requirements, installed_version


@pytest.mark.unit
class TestCheckRequirements:
    """Test the backend requirement report."""

    def test_installed_backend_satisfied(self):
        """Test that an importable backend with a matching version passes."""
        report = check_requirements({"packaging": ">=1.0"})
        assert report.satisfied
        assert report.import_error is None

    def test_missing_backend_reported(self):
        """Test that an unimportable backend is listed with its specifier."""
        report = check_requirements({"not_a_real_pkg_md2html": ">=1.0"})
        assert report.missing == [("not_a_real_pkg_md2html", ">=1.0")]
        assert isinstance(report.import_error, ImportError)

    def test_unknown_distribution_version(self):
        """Test that an unknown distribution has no version."""
        assert installed_version("not_a_real_pkg_md2html") is None


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the dependency-checking decorator."""

    def test_available_package_runs_function(self):
        """Test that the wrapped function runs when imports succeed."""

        @requires_dependencies("demo", {"packaging": ""})
        def func(value):
            return value * 2

        assert func(21) == 42

    def test_missing_package_raises(self):
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("demo", {"not_a_real_pkg_md2html": ">=1.0"})
        def func():
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            func()
        error = exc_info.value
        assert error.missing_packages == [("not_a_real_pkg_md2html", ">=1.0")]
        assert "not_a_real_pkg_md2html>=1.0" in error.install_command
        assert isinstance(error.original_import_error, ImportError)

    def test_version_mismatch_raises(self):
        """Test that an unsatisfiable version spec raises DependencyError."""

        @requires_dependencies("demo", {"packaging": ">=9999"})
        def func():
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            func()
        assert exc_info.value.version_mismatches[0][0] == "packaging"


@pytest.mark.unit
class TestDebugTimer:
    """Test the DEBUG timing context manager."""

    def test_logs_at_debug(self, caplog):
        """Test that elapsed time is logged when DEBUG is enabled."""
        logger = logging.getLogger("md2html.test")
        with caplog.at_level(logging.DEBUG, logger="md2html.test"):
            with debug_timer(logger, "Stage"):
                pass
        assert "Stage completed in" in caplog.text

    def test_silent_above_debug(self, caplog):
        """Test that nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("md2html.test")
        with caplog.at_level(logging.INFO, logger="md2html.test"):
            with debug_timer(logger, "Stage"):
                pass
        assert "Stage" not in caplog.text
