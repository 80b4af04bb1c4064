"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar

__all__ = (
    'ComponentType',
    'ButtonStyle',
    'TextStyle',
    'ChannelType',
    'SelectDefaultValueType',
    'Status',
    'try_enum',
    'create_enum',
)

E = TypeVar('E', bound=Enum)


def create_enum(name: str, keys: Iterable[str], aliases: Optional[Mapping[str, str]] = None) -> Type[Enum]:
    """Creates a closed enumeration from an ordered sequence of names.

    Values are assigned from ``0`` in the order the names are given.

    Parameters
    -----------
    name: :class:`str`
        The name of the new enum class.
    keys: Iterable[:class:`str`]
        The member names, in declaration order.
    aliases: Optional[Mapping[:class:`str`, :class:`str`]]
        Extra names mapped to the member they stand for. Aliases are
        accepted by name lookup but are not yielded when iterating.

    Returns
    --------
    Type[:class:`enum.Enum`]
        The new enum class.
    """
    members = [(key, value) for value, key in enumerate(keys)]
    if aliases:
        values = dict(members)
        members.extend((alias, values[key]) for alias, key in aliases.items())
    return Enum(name, members, module=__name__)  # type: ignore


class ComponentType(Enum):
    action_row = 1
    button = 2
    string_select = 3
    select = 3  # deprecated
    text_input = 4
    user_select = 5
    role_select = 6
    mentionable_select = 7
    channel_select = 8

    def __int__(self) -> int:
        return self.value


class ButtonStyle(Enum):
    primary = 1
    secondary = 2
    success = 3
    danger = 4
    link = 5
    premium = 6

    # Aliases
    blurple = 1
    grey = 2
    gray = 2
    green = 3
    red = 4
    url = 5

    def __int__(self) -> int:
        return self.value


class TextStyle(Enum):
    short = 1
    paragraph = 2

    # Aliases
    long = 2

    def __int__(self) -> int:
        return self.value


class ChannelType(Enum):
    text = 0
    private = 1
    voice = 2
    group = 3
    category = 4
    news = 5
    news_thread = 10
    public_thread = 11
    private_thread = 12
    stage_voice = 13
    directory = 14
    forum = 15
    media = 16

    def __str__(self) -> str:
        return self.name


class SelectDefaultValueType(Enum):
    user = 'user'
    role = 'role'
    channel = 'channel'


Status = create_enum(
    'Status',
    ('ready', 'idle', 'waiting_for_guilds'),
    aliases={'Ready': 'ready', 'Idle': 'idle', 'WaitingForGuilds': 'waiting_for_guilds'},
)


def try_enum(cls: Type[E], val: Any) -> E:
    """A function that tries to turn the value into enum ``cls``.

    If it fails it returns the value instead.
    """
    try:
        return cls(val)
    except (ValueError, TypeError):
        return val
