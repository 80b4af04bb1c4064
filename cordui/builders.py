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

import copy
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Union

from .enums import ButtonStyle, ChannelType, ComponentType, SelectDefaultValueType, TextStyle, try_enum
from .mixins import _BuilderTag, _ComponentTag
from .partial_emoji import PartialEmoji, _EmojiTag
from .components import SelectDefaultValue, SelectOption

if TYPE_CHECKING:
    from typing_extensions import Self

    from .abc import Snowflake
    from .components import Component
    from .types.components import (
        Component as ComponentPayload,
        SelectDefaultValues as SelectDefaultValuesPayload,
        SelectOption as SelectOptionPayload,
    )
    from .types.emoji import PartialEmoji as PartialEmojiPayload

    ComponentEmojiResolvable = Union[str, PartialEmoji, PartialEmojiPayload]
    SelectOptionResolvable = Union[SelectOption, SelectOptionPayload]
    SelectDefaultValueResolvable = Union[SelectDefaultValue, SelectDefaultValuesPayload]
    SnowflakeResolvable = Union[int, str, Snowflake]
    ComponentBuilderResolvable = Union['ComponentBuilder', Component, ComponentPayload, Mapping[str, Any]]

__all__ = (
    'ComponentBuilder',
    'ActionRowBuilder',
    'ButtonBuilder',
    'BaseSelectMenuBuilder',
    'StringSelectMenuBuilder',
    'UserSelectMenuBuilder',
    'RoleSelectMenuBuilder',
    'MentionableSelectMenuBuilder',
    'ChannelSelectMenuBuilder',
    'TextInputBuilder',
    'create_component_builder',
)

_log = logging.getLogger(__name__)


def _enum_value(value: Any) -> Any:
    return getattr(value, 'value', value)


def _resolve_emoji(emoji: ComponentEmojiResolvable) -> PartialEmojiPayload:
    if isinstance(emoji, str):
        return PartialEmoji.from_str(emoji).to_dict()
    if isinstance(emoji, _EmojiTag):
        return emoji._to_partial().to_dict()
    if isinstance(emoji, Mapping):
        return PartialEmoji.from_dict(emoji).to_dict()
    raise TypeError(f'expected str, Emoji, or PartialEmoji, received {emoji.__class__.__name__} instead')


def _resolve_option(option: SelectOptionResolvable) -> SelectOptionPayload:
    if isinstance(option, SelectOption):
        return option.to_dict()
    return copy.deepcopy(dict(option))  # type: ignore


def _resolve_default_value(value: SelectDefaultValueResolvable) -> SelectDefaultValuesPayload:
    if isinstance(value, SelectDefaultValue):
        return value.to_dict()
    return {'id': int(value['id']), 'type': _enum_value(value['type'])}


def _resolve_snowflake(obj: SnowflakeResolvable) -> int:
    return int(getattr(obj, 'id', obj))


class ComponentBuilder(_BuilderTag):
    """The base class for every component builder.

    Builders are the mutable counterpart of :class:`Component`. They are
    created before a message is sent and serialized with :meth:`to_dict`.
    Every ``set_*`` and ``add_*`` method returns the builder so calls
    can be chained.

    Payloads with a type this library does not know about are kept in
    this class directly.

    Parameters
    -----------
    data: Optional[:class:`dict`]
        The payload to start from.

    Attributes
    -----------
    data: :class:`dict`
        The payload built so far.
    """

    __slots__ = ('data',)

    _component_type: ClassVar[Optional[ComponentType]] = None

    def __init__(self, data: Optional[Mapping[str, Any]] = None, /) -> None:
        self.data: Dict[str, Any] = copy.deepcopy(dict(data)) if data else {}
        if self._component_type is not None:
            self.data['type'] = self._component_type.value

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} data={self.data!r}>'

    @property
    def type(self) -> Union[ComponentType, Any]:
        """Union[:class:`ComponentType`, Any]: The type of component being built."""
        return try_enum(ComponentType, self.data.get('type'))

    @classmethod
    def from_component(cls, component: Component, /) -> Self:
        """Creates a builder pre-filled with an existing component's payload.

        Parameters
        -----------
        component: :class:`Component`
            The component to copy.

        Returns
        --------
        :class:`ComponentBuilder`
            The new builder.
        """
        return cls(component.to_dict())

    def set_id(self, id: Optional[int]) -> Self:
        """Sets the ID of this component. Passing ``None`` removes it."""
        if id is None:
            self.data.pop('id', None)
        else:
            self.data['id'] = id
        return self

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.data)


class ActionRowBuilder(ComponentBuilder):
    """A builder for an action row.

    Children are resolved through :func:`create_component_builder`, so
    components, builders and raw payloads are all accepted.

    Attributes
    -----------
    components: List[:class:`ComponentBuilder`]
        The builders of the children in this row.
    """

    __slots__ = ('components',)

    _component_type = ComponentType.action_row

    def __init__(self, data: Optional[Mapping[str, Any]] = None, /) -> None:
        super().__init__(data)
        self.components: List[ComponentBuilder] = [
            create_component_builder(component) for component in self.data.pop('components', None) or []
        ]

    def __repr__(self) -> str:
        return f'<ActionRowBuilder components={self.components!r}>'

    def add_components(self, *components: ComponentBuilderResolvable) -> Self:
        """Adds components to this row."""
        self.components.extend(create_component_builder(component) for component in components)
        return self

    def set_components(self, *components: ComponentBuilderResolvable) -> Self:
        """Replaces every component in this row."""
        self.components = [create_component_builder(component) for component in components]
        return self

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload['components'] = [component.to_dict() for component in self.components]
        return payload


class ButtonBuilder(ComponentBuilder):
    """A builder for a button.

    .. note::

        A button has either a custom ID or a URL, never both. This is
        left for Discord to enforce.
    """

    __slots__ = ()

    _component_type = ComponentType.button

    def set_style(self, style: Union[ButtonStyle, int]) -> Self:
        """Sets the style of this button."""
        self.data['style'] = _enum_value(style)
        return self

    def set_url(self, url: str) -> Self:
        """Sets the URL this button links to."""
        self.data['url'] = url
        return self

    def set_custom_id(self, custom_id: str) -> Self:
        """Sets the custom ID this button sends during an interaction."""
        self.data['custom_id'] = custom_id
        return self

    def set_sku_id(self, sku_id: int) -> Self:
        self.data['sku_id'] = str(sku_id)
        return self

    def set_emoji(self, emoji: Optional[ComponentEmojiResolvable]) -> Self:
        """Sets the emoji shown on this button. Passing ``None`` removes it.

        Raises
        -------
        TypeError
            The emoji is not a :class:`str`, :class:`PartialEmoji` or emoji payload.
        """
        if emoji is None:
            self.data.pop('emoji', None)
        else:
            self.data['emoji'] = _resolve_emoji(emoji)
        return self

    def set_label(self, label: str) -> Self:
        """Sets the label of this button."""
        self.data['label'] = label
        return self

    def set_disabled(self, disabled: bool = True) -> Self:
        """Sets whether this button is disabled."""
        self.data['disabled'] = disabled
        return self


class BaseSelectMenuBuilder(ComponentBuilder):
    """The base class for every select menu builder."""

    __slots__ = ()

    def set_custom_id(self, custom_id: str) -> Self:
        self.data['custom_id'] = custom_id
        return self

    def set_placeholder(self, placeholder: str) -> Self:
        self.data['placeholder'] = placeholder
        return self

    def set_min_values(self, min_values: int) -> Self:
        self.data['min_values'] = min_values
        return self

    def set_max_values(self, max_values: int) -> Self:
        self.data['max_values'] = max_values
        return self

    def set_disabled(self, disabled: bool = True) -> Self:
        self.data['disabled'] = disabled
        return self


class StringSelectMenuBuilder(BaseSelectMenuBuilder):
    """A builder for a select menu of developer defined options.

    Options can be given as :class:`SelectOption` instances or as
    option payloads.
    """

    __slots__ = ()

    _component_type = ComponentType.string_select

    def __init__(self, data: Optional[Mapping[str, Any]] = None, /) -> None:
        super().__init__(data)
        self.data['options'] = [_resolve_option(option) for option in self.data.get('options') or []]

    @property
    def options(self) -> List[SelectOption]:
        """List[:class:`SelectOption`]: A copy of the options in this menu."""
        return [SelectOption.from_dict(option) for option in self.data['options']]

    def add_options(self, *options: SelectOptionResolvable) -> Self:
        """Adds options to the end of this menu."""
        self.data['options'].extend(_resolve_option(option) for option in options)
        return self

    def set_options(self, *options: SelectOptionResolvable) -> Self:
        """Replaces every option in this menu."""
        self.data['options'] = [_resolve_option(option) for option in options]
        return self

    def splice_options(self, index: int, delete_count: int, *options: SelectOptionResolvable) -> Self:
        """Removes, replaces or inserts options in place.

        Parameters
        -----------
        index: :class:`int`
            The index to start at. Negative values count from the end.
        delete_count: :class:`int`
            The number of options to remove.
        \\*options: Union[:class:`SelectOption`, :class:`dict`]
            The options to insert at ``index``.
        """
        current: List[SelectOptionPayload] = self.data['options']
        if index < 0:
            index = max(len(current) + index, 0)
        current[index : index + max(delete_count, 0)] = [_resolve_option(option) for option in options]
        return self


class _AutoPopulatedSelectMenuBuilder(BaseSelectMenuBuilder):
    __slots__ = ()

    def __init__(self, data: Optional[Mapping[str, Any]] = None, /) -> None:
        super().__init__(data)
        self.data['default_values'] = [_resolve_default_value(value) for value in self.data.get('default_values') or []]

    @property
    def default_values(self) -> List[SelectDefaultValue]:
        """List[:class:`SelectDefaultValue`]: A copy of the values selected by default."""
        return [SelectDefaultValue.from_dict(value) for value in self.data['default_values']]

    def _add_defaults(self, type: SelectDefaultValueType, values: Iterable[SnowflakeResolvable]) -> None:
        self.data['default_values'].extend({'id': _resolve_snowflake(value), 'type': type.value} for value in values)

    def _set_defaults(self, type: SelectDefaultValueType, values: Iterable[SnowflakeResolvable]) -> None:
        self.data['default_values'] = [value for value in self.data['default_values'] if value['type'] != type.value]
        self._add_defaults(type, values)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        if not payload['default_values']:
            del payload['default_values']
        return payload


class UserSelectMenuBuilder(_AutoPopulatedSelectMenuBuilder):
    """A builder for a select menu of users."""

    __slots__ = ()

    _component_type = ComponentType.user_select

    def add_default_users(self, *users: SnowflakeResolvable) -> Self:
        """Adds users that are selected by default."""
        self._add_defaults(SelectDefaultValueType.user, users)
        return self

    def set_default_users(self, *users: SnowflakeResolvable) -> Self:
        """Replaces the users that are selected by default."""
        self._set_defaults(SelectDefaultValueType.user, users)
        return self


class RoleSelectMenuBuilder(_AutoPopulatedSelectMenuBuilder):
    """A builder for a select menu of roles."""

    __slots__ = ()

    _component_type = ComponentType.role_select

    def add_default_roles(self, *roles: SnowflakeResolvable) -> Self:
        """Adds roles that are selected by default."""
        self._add_defaults(SelectDefaultValueType.role, roles)
        return self

    def set_default_roles(self, *roles: SnowflakeResolvable) -> Self:
        """Replaces the roles that are selected by default."""
        self._set_defaults(SelectDefaultValueType.role, roles)
        return self


class MentionableSelectMenuBuilder(_AutoPopulatedSelectMenuBuilder):
    """A builder for a select menu of users and roles."""

    __slots__ = ()

    _component_type = ComponentType.mentionable_select

    def add_default_users(self, *users: SnowflakeResolvable) -> Self:
        self._add_defaults(SelectDefaultValueType.user, users)
        return self

    def add_default_roles(self, *roles: SnowflakeResolvable) -> Self:
        self._add_defaults(SelectDefaultValueType.role, roles)
        return self

    def add_default_values(self, *values: SelectDefaultValueResolvable) -> Self:
        """Adds users or roles that are selected by default.

        Raises
        -------
        TypeError
            A value is neither a user nor a role.
        """
        self.data['default_values'].extend(self._resolve_mentionables(values))
        return self

    def set_default_values(self, *values: SelectDefaultValueResolvable) -> Self:
        """Replaces every value that is selected by default.

        The current values are kept if any new value is rejected.

        Raises
        -------
        TypeError
            A value is neither a user nor a role.
        """
        self.data['default_values'] = self._resolve_mentionables(values)
        return self

    def _resolve_mentionables(self, values: Iterable[SelectDefaultValueResolvable]) -> List[SelectDefaultValuesPayload]:
        resolved = [_resolve_default_value(value) for value in values]
        for value in resolved:
            if value['type'] not in (SelectDefaultValueType.user.value, SelectDefaultValueType.role.value):
                raise TypeError(f'expected a user or role default value, received {value["type"]!r} instead')
        return resolved


class ChannelSelectMenuBuilder(_AutoPopulatedSelectMenuBuilder):
    """A builder for a select menu of channels."""

    __slots__ = ()

    _component_type = ComponentType.channel_select

    @property
    def channel_types(self) -> List[ChannelType]:
        """List[:class:`ChannelType`]: The channel types that can be chosen."""
        return [try_enum(ChannelType, t) for t in self.data.get('channel_types', [])]

    def add_channel_types(self, *types: Union[ChannelType, int]) -> Self:
        """Adds channel types that can be chosen in this menu."""
        self.data.setdefault('channel_types', []).extend(_enum_value(t) for t in types)
        return self

    def set_channel_types(self, *types: Union[ChannelType, int]) -> Self:
        """Replaces the channel types that can be chosen in this menu."""
        self.data['channel_types'] = [_enum_value(t) for t in types]
        return self

    def add_default_channels(self, *channels: SnowflakeResolvable) -> Self:
        """Adds channels that are selected by default."""
        self._add_defaults(SelectDefaultValueType.channel, channels)
        return self

    def set_default_channels(self, *channels: SnowflakeResolvable) -> Self:
        """Replaces the channels that are selected by default."""
        self._set_defaults(SelectDefaultValueType.channel, channels)
        return self


class TextInputBuilder(ComponentBuilder):
    """A builder for a text input."""

    __slots__ = ()

    _component_type = ComponentType.text_input

    def set_custom_id(self, custom_id: str) -> Self:
        self.data['custom_id'] = custom_id
        return self

    def set_label(self, label: str) -> Self:
        self.data['label'] = label
        return self

    def set_style(self, style: Union[TextStyle, int]) -> Self:
        self.data['style'] = _enum_value(style)
        return self

    def set_min_length(self, min_length: int) -> Self:
        self.data['min_length'] = min_length
        return self

    def set_max_length(self, max_length: int) -> Self:
        self.data['max_length'] = max_length
        return self

    def set_placeholder(self, placeholder: str) -> Self:
        self.data['placeholder'] = placeholder
        return self

    def set_value(self, value: str) -> Self:
        """Sets the text the input is pre-filled with."""
        self.data['value'] = value
        return self

    def set_required(self, required: bool = True) -> Self:
        self.data['required'] = required
        return self


def create_component_builder(data: ComponentBuilderResolvable, /) -> ComponentBuilder:
    """Transforms API data into a component builder.

    Builders are returned as is. A :class:`Component` is never returned
    unchanged, its payload is dispatched like any other so the result is
    always a fresh builder.

    A payload whose ``type`` is missing or unknown is kept in a plain
    :class:`ComponentBuilder` instead of raising.

    Parameters
    -----------
    data: Union[:class:`dict`, :class:`Component`, :class:`ComponentBuilder`]
        The data to create the builder from.

    Returns
    --------
    :class:`ComponentBuilder`
        The matching builder.
    """
    if isinstance(data, _BuilderTag):
        return data  # type: ignore

    if isinstance(data, _ComponentTag):
        data = data.to_dict()  # type: ignore

    component_type = try_enum(ComponentType, data.get('type'))  # type: ignore
    if component_type is ComponentType.action_row:
        return ActionRowBuilder(data)
    elif component_type is ComponentType.button:
        return ButtonBuilder(data)
    elif component_type is ComponentType.string_select:
        return StringSelectMenuBuilder(data)
    elif component_type is ComponentType.text_input:
        return TextInputBuilder(data)
    elif component_type is ComponentType.user_select:
        return UserSelectMenuBuilder(data)
    elif component_type is ComponentType.role_select:
        return RoleSelectMenuBuilder(data)
    elif component_type is ComponentType.mentionable_select:
        return MentionableSelectMenuBuilder(data)
    elif component_type is ComponentType.channel_select:
        return ChannelSelectMenuBuilder(data)
    else:
        _log.debug('Unknown component type %r received, falling back to ComponentBuilder.', component_type)
        return ComponentBuilder(data)
