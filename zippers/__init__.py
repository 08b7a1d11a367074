from . import cons, fn, rose, sequence, tree
from .errors import NotFound

__all__ = ['NotFound', 'cons', 'fn', 'rose', 'sequence', 'tree']
