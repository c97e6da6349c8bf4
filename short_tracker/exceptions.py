# exceptions.py
class CancelAction(Exception):
    """Console input: abandon the current action and return to the main menu."""


class GoBackAction(Exception):
    """Console input: return to the previous menu."""


class InvalidWorkerName(ValueError):
    """Worker names must be non-empty after trimming."""
