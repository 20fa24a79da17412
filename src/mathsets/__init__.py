"""
mathsets - Lazy, infinite-safe mathematical sets.

Sets may be listed explicitly or described by a predicate over a possibly
infinite domain. Enumeration is lazy, every set reports its cardinality
class, and nothing infinite is ever forced into memory.

Helpers outside the set types live in submodules, imported with the package:
    mathsets.laws        set-algebra law checks over a finite universe
    mathsets.paradoxes   Russell and Cantor demonstrations
    mathsets.predicates  predicate combinators for filter()
"""

from mathsets.base import MathSet, Representation
from mathsets.bitvector import BitVectorSet
from mathsets.cardinality import (
    COUNTABLY_INFINITE,
    UNCOUNTABLE,
    UNKNOWN,
    Cardinality,
    CardinalityKind,
)
from mathsets.config import (
    MathSetsConfig,
    configure_logging,
    get_config,
    load_config,
    set_config,
)
from mathsets.errors import (
    ConfigError,
    EnumerationError,
    ErrorCode,
    MaterializationError,
    MathSetError,
    PreconditionError,
)
from mathsets.extensional import (
    ExtensionalSet,
    empty_set,
    math_set_from,
    math_set_of,
    singleton,
)
from mathsets.intensional import IntensionalSet
from mathsets.mapped import MappedSet
from mathsets.powerset import LazyPowerSetView
from mathsets.universal import (
    COMPLEXES,
    EXTENDED_REALS,
    IMAGINARIES,
    INTEGERS,
    IRRATIONALS,
    NATURALS,
    RATIONALS,
    REALS,
)
from mathsets.views import IntersectionView, UnionView
from mathsets import laws, paradoxes, predicates

__version__ = "0.1.0"
__all__ = [
    # Contract
    "MathSet",
    "Representation",
    # Cardinality
    "Cardinality",
    "CardinalityKind",
    "COUNTABLY_INFINITE",
    "UNCOUNTABLE",
    "UNKNOWN",
    # Representations
    "ExtensionalSet",
    "IntensionalSet",
    "MappedSet",
    "LazyPowerSetView",
    "BitVectorSet",
    "UnionView",
    "IntersectionView",
    # Factories
    "empty_set",
    "singleton",
    "math_set_of",
    "math_set_from",
    # Universal sets
    "NATURALS",
    "INTEGERS",
    "RATIONALS",
    "REALS",
    "IRRATIONALS",
    "IMAGINARIES",
    "COMPLEXES",
    "EXTENDED_REALS",
    # Errors
    "MathSetError",
    "MaterializationError",
    "EnumerationError",
    "PreconditionError",
    "ConfigError",
    "ErrorCode",
    # Submodules
    "laws",
    "paradoxes",
    "predicates",
    # Configuration
    "MathSetsConfig",
    "get_config",
    "set_config",
    "load_config",
    "configure_logging",
]
