# File: beaver_core/models/user.py

"""
User record.

A plain value holder. Construction rules, validation and persistence for
users are not defined here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class User:
    id: Optional[UUID] = None
    email: Optional[str] = None
    # already hashed; never the clear-text password
    password: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    active: bool = False
