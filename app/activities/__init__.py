"""Quiz Activities for the Vocab Quiz"""

from app.activities.base import AbstractActivity
from app.activities.recall_activity import RecallActivity

__all__ = [
    "AbstractActivity",
    "RecallActivity",
]
