# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict

UserId: TypeAlias = str


class Assignee(TypedDict):
    id: UserId
    name: str
    picture_path: Optional[str]


class User(TypedDict):
    id: UserId
    name: str
    picture_path: Optional[str]
    role: Optional[str]
    color: Optional[str]
