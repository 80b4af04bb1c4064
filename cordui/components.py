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
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Literal, Mapping, Optional, Tuple, Union

from .enums import ButtonStyle, ChannelType, ComponentType, SelectDefaultValueType, TextStyle, try_enum
from .mixins import _BuilderTag, _ComponentTag
from .partial_emoji import PartialEmoji, _EmojiTag
from .utils import MISSING, _get_as_snowflake

if TYPE_CHECKING:
    from typing_extensions import Self

    from .abc import Snowflake
    from .builders import ComponentBuilder
    from .types.components import (
        ActionRow as ActionRowPayload,
        ChannelSelectComponent as ChannelSelectComponentPayload,
        Component as ComponentPayload,
        SelectDefaultValues as SelectDefaultValuesPayload,
        SelectOption as SelectOptionPayload,
        StringSelectComponent as StringSelectComponentPayload,
        TextInput as TextInputPayload,
    )

    ActionRowChildComponentType = Union[
        'ButtonComponent',
        'StringSelectMenuComponent',
        'UserSelectMenuComponent',
        'RoleSelectMenuComponent',
        'MentionableSelectMenuComponent',
        'ChannelSelectMenuComponent',
        'TextInputComponent',
        'Component',
    ]

__all__ = (
    'Component',
    'ActionRow',
    'ButtonComponent',
    'BaseSelectMenuComponent',
    'AutoPopulatedSelectMenuComponent',
    'StringSelectMenuComponent',
    'UserSelectMenuComponent',
    'RoleSelectMenuComponent',
    'MentionableSelectMenuComponent',
    'ChannelSelectMenuComponent',
    'TextInputComponent',
    'SelectOption',
    'SelectDefaultValue',
    'create_component',
)

_log = logging.getLogger(__name__)


class Component(_ComponentTag):
    """Represents a Discord Bot UI Kit Component.

    The components supported by Discord are:

    - :class:`ActionRow`
    - :class:`ButtonComponent`
    - :class:`StringSelectMenuComponent`
    - :class:`UserSelectMenuComponent`
    - :class:`RoleSelectMenuComponent`
    - :class:`MentionableSelectMenuComponent`
    - :class:`ChannelSelectMenuComponent`
    - :class:`TextInputComponent`

    Payloads with a type this library does not know about are wrapped
    in this class directly, so newer component types can still be
    inspected through :attr:`data`.

    All fields are read lazily from :attr:`data`. A payload missing a
    field required by its type raises :exc:`KeyError` when that field
    is accessed, not when the component is created.

    .. container:: operations

        .. describe:: x == y

            Checks if two components serialize to the same payload.

        .. describe:: x != y

            Checks if two components do not serialize to the same payload.

    Attributes
    -----------
    data: :class:`dict`
        The raw payload this component was created from.
    """

    __slots__ = ('data',)

    __repr_info__: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, data: Union[ComponentPayload, Mapping[str, Any]], /) -> None:
        self.data: Dict[str, Any] = copy.deepcopy(dict(data))

    def __repr__(self) -> str:
        attrs = ' '.join(f'{key}={getattr(self, key)!r}' for key in self.__repr_info__ if key in self.data)
        if attrs:
            return f'<{self.__class__.__name__} type={self.type!r} {attrs}>'
        return f'<{self.__class__.__name__} type={self.type!r}>'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _ComponentTag):
            return self.to_dict() == other.to_dict()  # type: ignore # every tagged object is a Component
        return NotImplemented

    __hash__ = None  # type: ignore

    @property
    def type(self) -> Union[ComponentType, Any]:
        """Union[:class:`ComponentType`, Any]: The type of component.

        If the type is not one this library knows about, the raw value is returned instead.
        """
        return try_enum(ComponentType, self.data.get('type'))

    @property
    def id(self) -> Optional[int]:
        """Optional[:class:`int`]: The ID of this component, if any."""
        return self.data.get('id')

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.data)


class ActionRow(Component):
    """Represents a Discord Bot UI Kit Action Row.

    This is a component that holds up to 5 children components in a row.

    This inherits from :class:`Component`.

    Attributes
    ------------
    children: List[:class:`Component`]
        The children components that this holds, if any.
    """

    __slots__ = ('children',)

    __repr_info__: ClassVar[Tuple[str, ...]] = ('id',)

    def __init__(self, data: Union[ActionRowPayload, Mapping[str, Any]], /) -> None:
        super().__init__(data)
        self.children: List[ActionRowChildComponentType] = [
            create_component(component_data) for component_data in self.data.get('components') or []
        ]

    def __repr__(self) -> str:
        return f'<ActionRow id={self.id!r} children={len(self.children)}>'

    @property
    def type(self) -> Literal[ComponentType.action_row]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.action_row

    def to_dict(self) -> ActionRowPayload:
        payload = super().to_dict()
        payload['type'] = self.type.value
        payload['components'] = [child.to_dict() for child in self.children]
        return payload  # type: ignore


class ButtonComponent(Component):
    """Represents a button from the Discord Bot UI Kit.

    This inherits from :class:`Component`.

    .. note::

        The user constructible and usable type to create a button is
        :class:`ButtonBuilder` not this one.
    """

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]] = ('style', 'custom_id', 'url', 'disabled', 'label', 'emoji')

    @property
    def type(self) -> Literal[ComponentType.button]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.button

    @property
    def style(self) -> ButtonStyle:
        """:class:`ButtonStyle`: The style of the button."""
        return try_enum(ButtonStyle, self.data['style'])

    @property
    def custom_id(self) -> Optional[str]:
        """Optional[:class:`str`]: The ID of the button that gets received during an interaction.

        If this button is for a URL, it does not have a custom ID.
        """
        return self.data.get('custom_id')

    @property
    def url(self) -> Optional[str]:
        """Optional[:class:`str`]: The URL this button sends you to."""
        return self.data.get('url')

    @property
    def disabled(self) -> bool:
        """:class:`bool`: Whether the button is disabled or not."""
        return self.data.get('disabled', False)

    @property
    def label(self) -> Optional[str]:
        """Optional[:class:`str`]: The label of the button, if any."""
        return self.data.get('label')

    @property
    def emoji(self) -> Optional[PartialEmoji]:
        """Optional[:class:`PartialEmoji`]: The emoji of the button, if available."""
        try:
            return PartialEmoji.from_dict(self.data['emoji'])
        except KeyError:
            return None

    @property
    def sku_id(self) -> Optional[int]:
        """Optional[:class:`int`]: The SKU ID this button sends you to, if available."""
        return _get_as_snowflake(self.data, 'sku_id')


class BaseSelectMenuComponent(Component):
    """The base class for every select menu from the Discord Bot UI Kit.

    A select menu is functionally the same as a dropdown, however
    on mobile it renders a bit differently.

    This inherits from :class:`Component`.
    """

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]] = ('custom_id', 'placeholder', 'min_values', 'max_values', 'disabled')

    @property
    def custom_id(self) -> str:
        """:class:`str`: The ID of the select menu that gets received during an interaction."""
        return self.data['custom_id']

    @property
    def placeholder(self) -> Optional[str]:
        """Optional[:class:`str`]: The placeholder text that is shown if nothing is selected, if any."""
        return self.data.get('placeholder')

    @property
    def min_values(self) -> Optional[int]:
        """Optional[:class:`int`]: The minimum number of items that must be chosen for this select menu.

        ``None`` means Discord's default of 1 applies.
        """
        return self.data.get('min_values')

    @property
    def max_values(self) -> Optional[int]:
        """Optional[:class:`int`]: The maximum number of items that can be chosen for this select menu.

        ``None`` means Discord's default of 1 applies.
        """
        return self.data.get('max_values')

    @property
    def disabled(self) -> bool:
        """:class:`bool`: Whether the select is disabled or not."""
        return self.data.get('disabled', False)


class StringSelectMenuComponent(BaseSelectMenuComponent):
    """Represents a select menu of developer defined options.

    This inherits from :class:`BaseSelectMenuComponent`.
    """

    __slots__ = ()

    data: StringSelectComponentPayload  # type: ignore

    @property
    def type(self) -> Literal[ComponentType.string_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.string_select

    @property
    def options(self) -> List[SelectOption]:
        """List[:class:`SelectOption`]: A list of options that can be selected in this menu."""
        return [SelectOption.from_dict(option) for option in self.data.get('options', [])]


class AutoPopulatedSelectMenuComponent(BaseSelectMenuComponent):
    """The base class for select menus whose options Discord fills in,
    such as users, roles or channels.

    This inherits from :class:`BaseSelectMenuComponent`.
    """

    __slots__ = ()

    @property
    def default_values(self) -> List[SelectDefaultValue]:
        """List[:class:`SelectDefaultValue`]: The values that are selected by default."""
        return [SelectDefaultValue.from_dict(value) for value in self.data.get('default_values', [])]


class UserSelectMenuComponent(AutoPopulatedSelectMenuComponent):
    """Represents a select menu of users."""

    __slots__ = ()

    @property
    def type(self) -> Literal[ComponentType.user_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.user_select


class RoleSelectMenuComponent(AutoPopulatedSelectMenuComponent):
    """Represents a select menu of roles."""

    __slots__ = ()

    @property
    def type(self) -> Literal[ComponentType.role_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.role_select


class MentionableSelectMenuComponent(AutoPopulatedSelectMenuComponent):
    """Represents a select menu of users and roles."""

    __slots__ = ()

    @property
    def type(self) -> Literal[ComponentType.mentionable_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.mentionable_select


class ChannelSelectMenuComponent(AutoPopulatedSelectMenuComponent):
    """Represents a select menu of channels."""

    __slots__ = ()

    data: ChannelSelectComponentPayload  # type: ignore

    @property
    def type(self) -> Literal[ComponentType.channel_select]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.channel_select

    @property
    def channel_types(self) -> List[ChannelType]:
        """List[:class:`ChannelType`]: A list of channel types that are allowed to be chosen in this select menu."""
        return [try_enum(ChannelType, t) for t in self.data.get('channel_types', [])]


class TextInputComponent(Component):
    """Represents a text input from the Discord Bot UI Kit.

    .. note::
        The user constructible and usable type to create a text input is
        :class:`TextInputBuilder` not this one.
    """

    __slots__ = ()

    __repr_info__: ClassVar[Tuple[str, ...]] = (
        'style',
        'label',
        'custom_id',
        'placeholder',
        'required',
        'min_length',
        'max_length',
    )

    data: TextInputPayload  # type: ignore

    @property
    def type(self) -> Literal[ComponentType.text_input]:
        """:class:`ComponentType`: The type of component."""
        return ComponentType.text_input

    @property
    def custom_id(self) -> str:
        """:class:`str`: The ID of the text input that gets received during an interaction."""
        return self.data['custom_id']

    @property
    def style(self) -> TextStyle:
        """:class:`TextStyle`: The style of the text input."""
        return try_enum(TextStyle, self.data['style'])

    @property
    def label(self) -> Optional[str]:
        """Optional[:class:`str`]: The label to display above the text input."""
        return self.data.get('label')

    @property
    def placeholder(self) -> Optional[str]:
        """Optional[:class:`str`]: The placeholder text to display when the text input is empty."""
        return self.data.get('placeholder')

    @property
    def value(self) -> Optional[str]:
        """Optional[:class:`str`]: The pre-filled value of the text input."""
        return self.data.get('value')

    @property
    def default(self) -> Optional[str]:
        """Optional[:class:`str`]: The default value of the text input.

        This is an alias to :attr:`value`.
        """
        return self.value

    @property
    def required(self) -> bool:
        """:class:`bool`: Whether the text input is required."""
        return self.data.get('required', True)

    @property
    def min_length(self) -> Optional[int]:
        """Optional[:class:`int`]: The minimum length of the text input."""
        return self.data.get('min_length')

    @property
    def max_length(self) -> Optional[int]:
        """Optional[:class:`int`]: The maximum length of the text input."""
        return self.data.get('max_length')


class SelectOption:
    """Represents a select menu's option.

    These can be created by users and passed to
    :meth:`StringSelectMenuBuilder.add_options`.

    Parameters
    -----------
    label: :class:`str`
        The label of the option. This is displayed to users.
        Can only be up to 100 characters.
    value: :class:`str`
        The value of the option. This is not displayed to users.
        If not provided when constructed then it defaults to the label.
        Can only be up to 100 characters.
    description: Optional[:class:`str`]
        An additional description of the option, if any.
        Can only be up to 100 characters.
    emoji: Optional[Union[:class:`str`, :class:`PartialEmoji`]]
        The emoji of the option, if available.
    default: :class:`bool`
        Whether this option is selected by default.
    """

    __slots__ = (
        'label',
        'value',
        'description',
        '_emoji',
        'default',
    )

    def __init__(
        self,
        *,
        label: str,
        value: str = MISSING,
        description: Optional[str] = None,
        emoji: Optional[Union[str, PartialEmoji]] = None,
        default: bool = False,
    ) -> None:
        self.label: str = label
        self.value: str = label if value is MISSING else value
        self.description: Optional[str] = description

        self.emoji = emoji
        self.default: bool = default

    def __repr__(self) -> str:
        return (
            f'<SelectOption label={self.label!r} value={self.value!r} description={self.description!r} '
            f'emoji={self.emoji!r} default={self.default!r}>'
        )

    def __str__(self) -> str:
        if self.emoji:
            base = f'{self.emoji} {self.label}'
        else:
            base = self.label

        if self.description:
            return f'{base}\n{self.description}'
        return base

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectOption):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    __hash__ = None  # type: ignore

    @property
    def emoji(self) -> Optional[PartialEmoji]:
        """Optional[:class:`.PartialEmoji`]: The emoji of the option, if available."""
        return self._emoji

    @emoji.setter
    def emoji(self, value: Optional[Union[str, PartialEmoji]]) -> None:
        if value is not None:
            if isinstance(value, str):
                self._emoji = PartialEmoji.from_str(value)
            elif isinstance(value, _EmojiTag):
                self._emoji = value._to_partial()
            else:
                raise TypeError(f'expected str, Emoji, or PartialEmoji, received {value.__class__.__name__} instead')
        else:
            self._emoji = None

    @classmethod
    def from_dict(cls, data: SelectOptionPayload) -> SelectOption:
        try:
            emoji = PartialEmoji.from_dict(data['emoji'])  # pyright: ignore[reportTypedDictNotRequiredAccess]
        except KeyError:
            emoji = None

        return cls(
            label=data['label'],
            value=data['value'],
            description=data.get('description'),
            emoji=emoji,
            default=data.get('default', False),
        )

    def to_dict(self) -> SelectOptionPayload:
        payload: SelectOptionPayload = {
            'label': self.label,
            'value': self.value,
            'default': self.default,
        }

        if self.emoji:
            payload['emoji'] = self.emoji.to_dict()

        if self.description:
            payload['description'] = self.description

        return payload

    def copy(self) -> SelectOption:
        return self.__class__.from_dict(self.to_dict())


class SelectDefaultValue:
    """Represents a select menu's default value.

    These can be created by users.

    Parameters
    -----------
    id: :class:`int`
        The id of a role, user, or channel.
    type: :class:`SelectDefaultValueType`
        The type of value that ``id`` represents.
    """

    __slots__ = ('id', '_type')

    def __init__(
        self,
        *,
        id: int,
        type: SelectDefaultValueType,
    ) -> None:
        self.id: int = id
        self.type = type

    @property
    def type(self) -> SelectDefaultValueType:
        """:class:`SelectDefaultValueType`: The type of value that ``id`` represents."""
        return self._type

    @type.setter
    def type(self, value: SelectDefaultValueType) -> None:
        if not isinstance(value, SelectDefaultValueType):
            raise TypeError(f'expected SelectDefaultValueType, received {value.__class__.__name__} instead')

        self._type = value

    def __repr__(self) -> str:
        return f'<SelectDefaultValue id={self.id!r} type={self.type!r}>'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectDefaultValue):
            return self.id == other.id and self.type is other.type
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.id, self.type))

    @classmethod
    def from_dict(cls, data: SelectDefaultValuesPayload) -> SelectDefaultValue:
        return cls(
            id=int(data['id']),
            type=try_enum(SelectDefaultValueType, data['type']),
        )

    def to_dict(self) -> SelectDefaultValuesPayload:
        return {
            'id': self.id,
            'type': self._type.value,
        }

    @classmethod
    def from_channel(cls, channel: Snowflake, /) -> Self:
        """Creates a :class:`SelectDefaultValue` with the type set to :attr:`~SelectDefaultValueType.channel`.

        Parameters
        -----------
        channel: :class:`~cordui.abc.Snowflake`
            The channel to create the default value for.

        Returns
        --------
        :class:`SelectDefaultValue`
            The default value created with the channel.
        """
        return cls(id=channel.id, type=SelectDefaultValueType.channel)

    @classmethod
    def from_role(cls, role: Snowflake, /) -> Self:
        """Creates a :class:`SelectDefaultValue` with the type set to :attr:`~SelectDefaultValueType.role`."""
        return cls(id=role.id, type=SelectDefaultValueType.role)

    @classmethod
    def from_user(cls, user: Snowflake, /) -> Self:
        """Creates a :class:`SelectDefaultValue` with the type set to :attr:`~SelectDefaultValueType.user`."""
        return cls(id=user.id, type=SelectDefaultValueType.user)


def create_component(
    data: Union[ComponentPayload, Mapping[str, Any], Component, ComponentBuilder], /
) -> Component:
    """Transforms API data into a component.

    Components are returned as is, builders are read through their
    :meth:`~ComponentBuilder.to_dict` and then treated like any other payload.

    A payload whose ``type`` is missing or unknown is wrapped in a plain
    :class:`Component` instead of raising.

    Parameters
    -----------
    data: Union[:class:`dict`, :class:`Component`, :class:`ComponentBuilder`]
        The data to create the component from.

    Returns
    --------
    :class:`Component`
        The matching component.
    """
    if isinstance(data, _ComponentTag):
        return data  # type: ignore

    if isinstance(data, _BuilderTag):
        data = data.to_dict()  # type: ignore

    component_type = try_enum(ComponentType, data.get('type'))  # type: ignore
    if component_type is ComponentType.action_row:
        return ActionRow(data)  # type: ignore
    elif component_type is ComponentType.button:
        return ButtonComponent(data)  # type: ignore
    elif component_type is ComponentType.string_select:
        return StringSelectMenuComponent(data)  # type: ignore
    elif component_type is ComponentType.text_input:
        return TextInputComponent(data)  # type: ignore
    elif component_type is ComponentType.user_select:
        return UserSelectMenuComponent(data)  # type: ignore
    elif component_type is ComponentType.role_select:
        return RoleSelectMenuComponent(data)  # type: ignore
    elif component_type is ComponentType.mentionable_select:
        return MentionableSelectMenuComponent(data)  # type: ignore
    elif component_type is ComponentType.channel_select:
        return ChannelSelectMenuComponent(data)  # type: ignore
    else:
        _log.debug('Unknown component type %r received, falling back to Component.', component_type)
        return Component(data)  # type: ignore
