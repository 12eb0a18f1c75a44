#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2html library.

Converting a document never raises: malformed Markdown passes through as text
and highlighter failures degrade to unhighlighted code. The exceptions below
cover the configuration surface and the optional highlighter integration.

Exception Hierarchy
-------------------
- Md2HtmlError (base exception)

  - ValidationError (invalid option values)

  - HighlightError (syntax highlighter failures, recovered internally)

  - DependencyError (missing/incompatible optional packages)

"""

from typing import Any


class Md2HtmlError(Exception):
    """Base exception class for all md2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2HtmlError):
    """Exception raised for invalid option values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class HighlightError(Md2HtmlError):
    """Exception raised when a code block cannot be highlighted.

    The pipeline catches this (and any other highlighter exception) and
    renders the code block unhighlighted.

    Parameters
    ----------
    message : str
        Description of the failure
    language : str, optional
        Language tag that was requested, if any
    original_error : Exception, optional
        The original exception raised by the highlighting backend

    """

    def __init__(self, message: str, language: str | None = None, original_error: Exception | None = None):
        """Initialize the highlight error with the requested language."""
        super().__init__(message, original_error=original_error)
        self.language = language


class DependencyError(Md2HtmlError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies (e.g. "highlight")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while importing a missing package

    Attributes
    ----------
    feature_name : str
        The feature that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    version_mismatches : list[tuple[str, str, str]]
        Packages with version mismatches
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error

        packages_to_install = [f"{name}{spec}" for name, spec in missing_packages]
        packages_to_install.extend(f"{name}{required}" for name, required, _ in version_mismatches)
        self.install_command = "pip install " + " ".join(f"'{pkg}'" for pkg in packages_to_install)

        if message is None:
            message_parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{feature_name} requires the following packages: {pkg_list}")
            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{feature_name} has version mismatches: {mismatch_str}")
            message_parts.append(f"Install with: {self.install_command}")
            message = ". ".join(message_parts)

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
