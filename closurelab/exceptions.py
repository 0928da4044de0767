"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class DuplicateNameError(ValueError):
    """
    Error for names registered or bound more than once.
    """
    def __init__(self, name, kind="snippet", owner=None):
        self.name = name
        self.kind = kind
        message = f"Duplicate {kind} name '{name}'"
        if owner is not None:
            message += f" in {owner}"
        super().__init__(message)


class UndefinedBindingError(KeyError):
    """
    Error for captures that reference a binding the sandbox does not hold.
    """
    def __init__(self, name, sandbox=None):
        self.name = name
        message = f"Undefined binding '{name}'"
        if sandbox is not None:
            message += f" in {sandbox}"
        super().__init__(message)

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class UseAfterReleaseError(RuntimeError):
    """
    Error for unowned references dereferenced after their owner was released.
    """
    def __init__(self, owner_name, action=None):
        self.owner_name = owner_name
        message = f"Owner '{owner_name}' was released"
        if action is not None:
            message += f" before '{action}' could run"
        super().__init__(message)
