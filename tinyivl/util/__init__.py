# Error handling shared by tinyivl and its diagnostic scripts.

class UserError(Exception):
    '''Raised when a caller hands tinyivl something it cannot work with
    '''
    def __init__(self, value):
        super(UserError, self).__init__(value)
        self.value = value

    def __str__(self):
        return repr(self.value)

def range_assert(condition, msg):
    """Raise a UserError if the condition is not satisfied
    """
    if not condition:
        raise UserError(msg)

def check_canonical(rmap):
    """Check that the boundary table of rmap is sorted and free of redundant entries.

    A boundary is redundant when it carries the same value as the boundary
    before it, or as the default if it is the first one.  Raises UserError
    naming the first offending boundary.
    """
    previous_key = None
    previous_value = rmap.default
    first = True
    for key, value in rmap:
        if not first:
            range_assert(previous_key < key,
                         "Boundary {0!r} is not above {1!r}".format(key, previous_key))
        range_assert(not (value == previous_value),
                     "Boundary {0!r} repeats value {1!r}".format(key, value))
        previous_key, previous_value = key, value
        first = False

from . import debug
