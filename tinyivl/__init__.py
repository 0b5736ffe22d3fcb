# Compressed maps from ordered keys to values, stored as the boundaries
# where the value changes.

from .rangemap import RangeMap
from .util import UserError, check_canonical

__all__ = ['RangeMap', 'UserError', 'check_canonical']
