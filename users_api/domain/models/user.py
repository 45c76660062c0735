"""
User Model
==========

Domain model representing one stored user record.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from users_api.utils.datetime_utils import now


@dataclass
class User:
    """
    User domain model.

    `id` is assigned by the store on insert and stays None until then.
    `created_at` is stamped once at creation and never changed.
    """
    name: str
    email: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
