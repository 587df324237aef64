"""newsorder - newspaper-order checks for methods and functions.

A member that calls a sibling (a method in the same class, or a top-level
function in the same file) must be declared before the sibling it calls.
"""

__version__ = "0.1.0"
