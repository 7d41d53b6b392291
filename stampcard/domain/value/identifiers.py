"""Strongly typed identifiers for stamp card entities.

User ids are opaque strings: they may be chosen by a visitor (``guest``),
configured (``admin``) or generated at signup.
"""

from typing import NewType

UserId = NewType("UserId", str)
StampEventId = NewType("StampEventId", int)
AuthIdentityId = NewType("AuthIdentityId", int)
