#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/packages.py
"""Lookup of optional backends and their installed versions."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from importlib import metadata
from typing import Mapping

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version


@dataclass
class RequirementReport:
    """Outcome of checking a set of optional backends.

    Attributes
    ----------
    missing : list of (name, specifier)
        Backends that could not be imported
    mismatched : list of (name, specifier, installed)
        Backends whose installed version falls outside the specifier
    import_error : ImportError or None
        First import failure, kept as the cause of the eventual error

    """

    missing: list[tuple[str, str]] = field(default_factory=list)
    mismatched: list[tuple[str, str, str]] = field(default_factory=list)
    import_error: ImportError | None = None

    @property
    def satisfied(self) -> bool:
        return not (self.missing or self.mismatched)


def installed_version(name: str) -> str | None:
    """Return the installed version of distribution ``name``, or None."""
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def check_requirements(requirements: Mapping[str, str]) -> RequirementReport:
    """Import each backend and compare its version against a specifier.

    Parameters
    ----------
    requirements : mapping of str to str
        Distribution name (also its import name) to version specifier,
        e.g. ``{"pygments": ">=2.15"}``. An empty specifier accepts any version.

    Returns
    -------
    RequirementReport
        Missing and mismatched backends

    """
    report = RequirementReport()
    for name, specifier in requirements.items():
        try:
            importlib.import_module(name)
        except ImportError as e:
            report.missing.append((name, specifier))
            report.import_error = report.import_error or e
            continue

        if not specifier:
            continue
        found = installed_version(name)
        try:
            ok = found is not None and Version(found) in SpecifierSet(specifier)
        except InvalidVersion:
            ok = False
        if not ok:
            report.mismatched.append((name, specifier, found or "unknown"))
    return report
