from __future__ import annotations

from cordui import PartialEmoji


def test_from_str_custom() -> None:
    emoji = PartialEmoji.from_str('<a:dance:123456789012345678>')
    assert emoji.animated is True
    assert emoji.name == 'dance'
    assert emoji.id == 123456789012345678
    assert emoji.is_custom_emoji()
    assert str(emoji) == '<a:dance:123456789012345678>'


def test_from_str_unicode() -> None:
    emoji = PartialEmoji.from_str('\N{FIRE}')
    assert emoji.is_unicode_emoji()
    assert str(emoji) == '\N{FIRE}'
    assert emoji.to_dict() == {'id': None, 'name': '\N{FIRE}'}


def test_equality() -> None:
    assert PartialEmoji(name='\N{FIRE}') == PartialEmoji.from_str('\N{FIRE}')
    assert PartialEmoji(name='a', id=1) == PartialEmoji(name='b', id=1)
    assert PartialEmoji(name='a', id=1) != PartialEmoji(name='a', id=2)


def test_from_dict() -> None:
    emoji = PartialEmoji.from_dict({'id': '123456789012345678', 'name': 'thonk', 'animated': False})
    assert emoji.id == 123456789012345678
    assert str(emoji) == '<:thonk:123456789012345678>'
