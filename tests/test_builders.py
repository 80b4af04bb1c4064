from __future__ import annotations

import logging
from typing import Any, Dict

import pytest

from cordui import (
    ActionRowBuilder,
    ButtonBuilder,
    ButtonComponent,
    ButtonStyle,
    ChannelSelectMenuBuilder,
    ChannelType,
    Component,
    ComponentBuilder,
    ComponentType,
    MentionableSelectMenuBuilder,
    PartialEmoji,
    RoleSelectMenuBuilder,
    SelectDefaultValue,
    SelectDefaultValueType,
    SelectOption,
    StringSelectMenuBuilder,
    TextInputBuilder,
    TextStyle,
    UserSelectMenuBuilder,
    create_component,
    create_component_builder,
)

BUILDER_TABLE = [
    (1, ActionRowBuilder),
    (2, ButtonBuilder),
    (3, StringSelectMenuBuilder),
    (4, TextInputBuilder),
    (5, UserSelectMenuBuilder),
    (6, RoleSelectMenuBuilder),
    (7, MentionableSelectMenuBuilder),
    (8, ChannelSelectMenuBuilder),
]


class FakeUser:
    def __init__(self, id: int) -> None:
        self.id = id


@pytest.mark.parametrize('tag,cls', BUILDER_TABLE)
def test_known_tags_dispatch_to_their_builder(tag: int, cls: type) -> None:
    builder = create_component_builder({'type': tag})
    assert type(builder) is cls
    assert not isinstance(builder, Component)
    assert builder.type.value == tag


@pytest.mark.parametrize('tag,cls', BUILDER_TABLE)
def test_families_never_cross(tag: int, cls: type) -> None:
    builder = create_component_builder({'type': tag})
    component = create_component(builder)
    assert isinstance(component, Component)
    assert not isinstance(component, ComponentBuilder)

    rebuilt = create_component_builder(component)
    assert type(rebuilt) is cls
    assert rebuilt is not builder


def test_builder_is_returned_unchanged() -> None:
    builder = ButtonBuilder()
    assert create_component_builder(builder) is builder


def test_component_is_dispatched_not_returned() -> None:
    payload = {'type': 2, 'style': 3, 'label': 'Yes', 'custom_id': 'yes'}
    component = create_component(payload)
    builder = create_component_builder(component)
    assert isinstance(builder, ButtonBuilder)
    assert builder is not component
    assert builder.to_dict() == payload


@pytest.mark.parametrize('payload', [{'type': 99, 'spam': 'eggs'}, {}])
def test_unknown_tag_falls_back_to_base(payload: Dict[str, Any]) -> None:
    builder = create_component_builder(payload)
    assert type(builder) is ComponentBuilder
    assert builder.to_dict() == payload


def test_unknown_tag_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger='cordui.builders')
    create_component_builder({'type': 42})
    assert 'Unknown component type 42' in caplog.text


def test_builder_type_cannot_be_overridden() -> None:
    builder = ButtonBuilder({'type': 4, 'label': 'Hi'})
    assert builder.type is ComponentType.button
    assert builder.to_dict() == {'type': 2, 'label': 'Hi'}


def test_button_builder_chain() -> None:
    builder = (
        ButtonBuilder()
        .set_style(ButtonStyle.primary)
        .set_label('Think')
        .set_custom_id('think')
        .set_emoji('<:thonk:123456789012345678>')
        .set_disabled()
    )
    assert builder.to_dict() == {
        'type': 2,
        'style': 1,
        'label': 'Think',
        'custom_id': 'think',
        'emoji': {'id': 123456789012345678, 'name': 'thonk'},
        'disabled': True,
    }


def test_button_builder_emoji_forms() -> None:
    builder = ButtonBuilder().set_emoji('\N{THUMBS UP SIGN}')
    assert builder.data['emoji'] == {'id': None, 'name': '\N{THUMBS UP SIGN}'}

    builder.set_emoji(PartialEmoji(name='dance', id=123456789012345678, animated=True))
    assert builder.data['emoji'] == {'id': 123456789012345678, 'name': 'dance', 'animated': True}

    builder.set_emoji({'id': '123456789012345678', 'name': 'thonk'})
    assert builder.data['emoji'] == {'id': 123456789012345678, 'name': 'thonk'}

    builder.set_emoji(None)
    assert 'emoji' not in builder.data

    with pytest.raises(TypeError):
        builder.set_emoji(12)  # type: ignore


def test_link_button_builder() -> None:
    builder = ButtonBuilder().set_style(5).set_url('https://discord.com').set_sku_id(42)
    component = create_component(builder)
    assert isinstance(component, ButtonComponent)
    assert component.style is ButtonStyle.link
    assert component.url == 'https://discord.com'
    assert component.sku_id == 42


def test_action_row_builder_resolves_children() -> None:
    row = ActionRowBuilder().add_components(
        ButtonBuilder().set_label('a'),
        {'type': 2, 'style': 2, 'label': 'b'},
        create_component({'type': 2, 'style': 2, 'label': 'c'}),
    )
    assert [type(child) for child in row.components] == [ButtonBuilder] * 3
    assert [child['label'] for child in row.to_dict()['components']] == ['a', 'b', 'c']

    row.set_components(TextInputBuilder().set_custom_id('t'))
    assert row.to_dict() == {'type': 1, 'components': [{'type': 4, 'custom_id': 't'}]}


def test_action_row_builder_does_not_mutate_payload() -> None:
    payload = {'type': 1, 'components': [{'type': 2, 'style': 1, 'label': 'a'}]}
    row = ActionRowBuilder(payload)
    row.add_components(ButtonBuilder())
    assert len(payload['components']) == 1
    assert len(row.components) == 2


def test_action_row_builder_from_component() -> None:
    payload = {'type': 1, 'components': [{'type': 3, 'custom_id': 's', 'options': []}]}
    row = ActionRowBuilder.from_component(create_component(payload))
    assert isinstance(row.components[0], StringSelectMenuBuilder)
    assert row.to_dict() == payload


def test_string_select_builder_options() -> None:
    builder = (
        StringSelectMenuBuilder()
        .set_custom_id('fruit')
        .set_placeholder('Pick a fruit')
        .set_min_values(1)
        .set_max_values(2)
        .add_options(SelectOption(label='Apple'), {'label': 'Banana', 'value': 'banana'})
    )
    assert [option.label for option in builder.options] == ['Apple', 'Banana']

    builder.splice_options(0, 1, SelectOption(label='Cherry'))
    assert [option.label for option in builder.options] == ['Cherry', 'Banana']

    builder.splice_options(-1, 0, SelectOption(label='Date'))
    assert [option.label for option in builder.options] == ['Cherry', 'Date', 'Banana']

    payload = builder.to_dict()
    assert payload['type'] == 3
    assert payload['custom_id'] == 'fruit'
    assert payload['placeholder'] == 'Pick a fruit'
    assert (payload['min_values'], payload['max_values']) == (1, 2)
    assert payload['options'][0] == {'label': 'Cherry', 'value': 'Cherry', 'default': False}

    builder.set_options()
    assert builder.to_dict()['options'] == []


def test_user_select_builder_defaults() -> None:
    builder = UserSelectMenuBuilder().set_custom_id('who')
    assert 'default_values' not in builder.to_dict()

    builder.add_default_users(1, FakeUser(2), '3')
    assert builder.to_dict()['default_values'] == [
        {'id': 1, 'type': 'user'},
        {'id': 2, 'type': 'user'},
        {'id': 3, 'type': 'user'},
    ]

    builder.set_default_users(5)
    assert builder.default_values == [SelectDefaultValue(id=5, type=SelectDefaultValueType.user)]


def test_role_select_builder_defaults() -> None:
    builder = RoleSelectMenuBuilder().add_default_roles(7).set_disabled()
    payload = builder.to_dict()
    assert payload['default_values'] == [{'id': 7, 'type': 'role'}]
    assert payload['disabled'] is True


def test_mentionable_select_builder_defaults() -> None:
    builder = MentionableSelectMenuBuilder().add_default_users(1).add_default_roles(2)
    assert [value.type for value in builder.default_values] == [
        SelectDefaultValueType.user,
        SelectDefaultValueType.role,
    ]

    builder.set_default_values(SelectDefaultValue(id=3, type=SelectDefaultValueType.role))
    assert builder.to_dict()['default_values'] == [{'id': 3, 'type': 'role'}]

    with pytest.raises(TypeError):
        builder.add_default_values(SelectDefaultValue(id=4, type=SelectDefaultValueType.channel))


def test_channel_select_builder() -> None:
    builder = (
        ChannelSelectMenuBuilder()
        .set_custom_id('where')
        .set_channel_types(ChannelType.text, ChannelType.forum)
        .add_channel_types(5)
        .add_default_channels(9)
    )
    assert builder.channel_types == [ChannelType.text, ChannelType.forum, ChannelType.news]
    payload = builder.to_dict()
    assert payload['channel_types'] == [0, 15, 5]
    assert payload['default_values'] == [{'id': 9, 'type': 'channel'}]


def test_text_input_builder_chain() -> None:
    builder = (
        TextInputBuilder()
        .set_custom_id('bio')
        .set_label('About you')
        .set_style(TextStyle.paragraph)
        .set_min_length(10)
        .set_max_length(400)
        .set_placeholder('Tell us something')
        .set_value('Hello')
        .set_required(False)
    )
    assert builder.to_dict() == {
        'type': 4,
        'custom_id': 'bio',
        'label': 'About you',
        'style': 2,
        'min_length': 10,
        'max_length': 400,
        'placeholder': 'Tell us something',
        'value': 'Hello',
        'required': False,
    }


def test_set_id() -> None:
    builder = ButtonBuilder().set_id(3)
    assert builder.data['id'] == 3
    builder.set_id(None)
    assert 'id' not in builder.data


def test_builder_does_not_share_nested_values_with_its_source() -> None:
    payload = {'type': 8, 'custom_id': 'where', 'channel_types': [0]}
    component = create_component(payload)

    create_component_builder(component).add_channel_types(5)
    assert component.data['channel_types'] == [0]

    ChannelSelectMenuBuilder(payload).add_channel_types(5).add_default_channels(9)
    assert payload == {'type': 8, 'custom_id': 'where', 'channel_types': [0]}


def test_builder_payload_is_a_copy() -> None:
    emoji = {'id': None, 'name': '\N{FIRE}'}
    builder = ButtonBuilder({'type': 2, 'style': 1, 'emoji': emoji})
    emoji['name'] = 'changed'
    assert builder.data['emoji']['name'] == '\N{FIRE}'

    builder.to_dict()['emoji']['name'] = 'changed'
    assert builder.data['emoji']['name'] == '\N{FIRE}'

    option = {'label': 'Apple', 'value': 'apple', 'emoji': {'id': None, 'name': 'A'}}
    menu = StringSelectMenuBuilder().add_options(option)
    option['emoji']['name'] = 'B'
    assert menu.options[0].emoji is not None and menu.options[0].emoji.name == 'A'


def test_builder_accepts_null_lists() -> None:
    assert ActionRowBuilder({'type': 1, 'components': None}).components == []
    assert StringSelectMenuBuilder({'type': 3, 'options': None}).options == []
    assert UserSelectMenuBuilder({'type': 5, 'default_values': None}).default_values == []


def test_set_default_values_keeps_current_values_on_error() -> None:
    builder = MentionableSelectMenuBuilder().add_default_users(1)

    with pytest.raises(TypeError):
        builder.set_default_values(
            SelectDefaultValue(id=2, type=SelectDefaultValueType.role),
            SelectDefaultValue(id=4, type=SelectDefaultValueType.channel),
        )

    assert builder.to_dict()['default_values'] == [{'id': 1, 'type': 'user'}]
