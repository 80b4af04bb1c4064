from __future__ import annotations

import pytest

from cordui import ButtonStyle, ComponentType, Status, create_enum, try_enum


def test_status_members() -> None:
    assert [member.name for member in Status] == ['ready', 'idle', 'waiting_for_guilds']
    assert [member.value for member in Status] == [0, 1, 2]
    assert len({member.value for member in Status}) == 3
    assert all(isinstance(member.value, int) for member in Status)


def test_status_lookup() -> None:
    assert Status['ready'] is Status(0)
    assert Status['waiting_for_guilds'].value == 2

    with pytest.raises(KeyError):
        Status['connecting']

    with pytest.raises(ValueError):
        Status(9)


def test_status_is_immutable() -> None:
    with pytest.raises(AttributeError):
        Status.ready = 5  # type: ignore

    with pytest.raises(TypeError):
        Status.__members__['connecting'] = 3  # type: ignore

    assert Status.ready.value == 0
    assert len(Status) == 3


def test_create_enum_assigns_ordinals() -> None:
    Phase = create_enum('Phase', ['start', 'middle', 'end'])
    assert Phase.__name__ == 'Phase'
    assert {name: member.value for name, member in Phase.__members__.items()} == {'start': 0, 'middle': 1, 'end': 2}


def test_try_enum() -> None:
    assert try_enum(ComponentType, 2) is ComponentType.button
    assert try_enum(ComponentType, 1000) == 1000
    assert try_enum(ComponentType, None) is None


def test_aliases() -> None:
    assert ComponentType.select is ComponentType.string_select
    assert ButtonStyle.blurple is ButtonStyle.primary
    assert int(ComponentType.channel_select) == 8


def test_status_camel_case_names() -> None:
    assert Status['Ready'] is Status.ready
    assert Status['Idle'] is Status.idle
    assert Status['WaitingForGuilds'] is Status.waiting_for_guilds
    assert len(Status) == 3


def test_create_enum_aliases() -> None:
    Phase = create_enum('Phase', ['start', 'end'], aliases={'Begin': 'start'})
    assert Phase['Begin'] is Phase.start
    assert [member.name for member in Phase] == ['start', 'end']
