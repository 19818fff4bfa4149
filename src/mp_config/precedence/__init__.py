"""Precedence – loader ordering strategies and merge."""
from mp_config.precedence.resolver import (
    AWS_FIRST,
    LOCAL_FIRST,
    LoaderPrecedence,
    MergeResult,
    PrecedenceResolver,
    PrecedenceSpec,
)

__all__ = [
    "AWS_FIRST",
    "LOCAL_FIRST",
    "LoaderPrecedence",
    "MergeResult",
    "PrecedenceResolver",
    "PrecedenceSpec",
]
