"""Composition utilities: pipe(), flow() and currying helpers."""

from fp_prelude.compose.curry import Curried, constant, curry, identity
from fp_prelude.compose.pipe import flow, pipe

__all__ = [
    'Curried',
    'constant',
    'curry',
    'flow',
    'identity',
    'pipe',
]
