import json

import cordui

# A message payload as it would arrive from the gateway
MESSAGE_COMPONENTS = [
    {
        'type': 1,
        'components': [
            {'type': 2, 'style': 1, 'label': 'Accept', 'custom_id': 'accept'},
            {'type': 2, 'style': 4, 'label': 'Decline', 'custom_id': 'decline'},
        ],
    },
    {
        'type': 1,
        'components': [
            {
                'type': 3,
                'custom_id': 'colour',
                'placeholder': 'Pick a colour',
                'options': [
                    {'label': 'Red', 'value': 'red', 'emoji': {'id': None, 'name': '\N{LARGE RED CIRCLE}'}},
                    {'label': 'Blue', 'value': 'blue'},
                ],
            },
        ],
    },
]

rows = [cordui.create_component(data) for data in MESSAGE_COMPONENTS]
for row in rows:
    for child in row.children:
        print(child)

# Disable every button before sending the message back
reply = []
for row in rows:
    builder = cordui.create_component_builder(row)
    for child in builder.components:
        if isinstance(child, cordui.ButtonBuilder):
            child.set_disabled()
    reply.append(builder.to_dict())

print(json.dumps(reply, indent=2, ensure_ascii=False))
