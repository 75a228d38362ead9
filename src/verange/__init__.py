# SPDX-License-Identifier: MIT
"""Version and version-range parsing for dependency resolvers.

Versions accept informal spellings (``v1``, ``1.2``, ``1.2.3.4-rc1+linux``)
and ranges accept the usual operators (``^1.2``, ``~1.2.3``,
``>=1.0, <2.0, !=1.5``). Ranges are normalized to an inclusive lower bound,
an exclusive upper bound and explicit exclusion/inclusion sets.

Example:
    >>> from verange import parse_version, parse_range, is_older_than
    >>>
    >>> version = parse_version("1.2.3-alpha+build")
    >>> version.minor
    2
    >>> str(version.prerelease)
    'alpha'
    >>>
    >>> parse_range("^1.2").contains(version)
    True
    >>> is_older_than("1.0.0-alpha", "1.0.0")
    True
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    InvalidVersionError,
    InvalidRangeError,
    InvalidIdentifierError,
)
from .identifier import Identifier
from .semver import Version
from .compare import (
    TemporalOrder,
    order_compare,
    structural_equal,
    version_key,
    is_older_than,
    is_older_than_with_build,
)
from .ranges import (
    Op,
    BoundPolicy,
    Range,
    desugar,
)
from .grammar import (
    parse_version,
    parse_clauses,
    parse_range,
)
from .dependency import Dependency, parse_dependency

__all__ = [
    # Errors
    "ParseError",
    "InvalidVersionError",
    "InvalidRangeError",
    "InvalidIdentifierError",
    # Values
    "Identifier",
    "Version",
    # Version comparison
    "TemporalOrder",
    "order_compare",
    "structural_equal",
    "version_key",
    "is_older_than",
    "is_older_than_with_build",
    # Ranges
    "Op",
    "BoundPolicy",
    "Range",
    "desugar",
    # Parsing
    "parse_version",
    "parse_clauses",
    "parse_range",
    # Dependencies
    "Dependency",
    "parse_dependency",
]
