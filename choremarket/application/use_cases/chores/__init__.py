"""Use cases for the chore lifecycle outside of cancellation."""

from .assign_worker import assign_worker
from .close_chore import close_chore
from .complete_chore import complete_chore
from .create_chore import create_chore
from .get_chore import get_chore
from .list_chores import list_chores
from .publish_chore import publish_chore
from .start_chore import start_chore

__all__ = [
    "assign_worker",
    "close_chore",
    "complete_chore",
    "create_chore",
    "get_chore",
    "list_chores",
    "publish_chore",
    "start_chore",
]
