"""Render-condition subtrees.

``and``/``or`` conditions nest their children as ``cond1``, ``cond2``...
to any depth; ``simple`` and ``privilege`` are leaves.
"""

from typing import Any, Optional

from aem_dialog_gen.domain.constants import RENDER_CONDITION_PREFIX
from aem_dialog_gen.domain.enums import RenderConditionType
from aem_dialog_gen.markup import XmlNode

RENDER_CONDITION_TAG = 'granite:rendercondition'

_COMPOSITE_TYPES = {RenderConditionType.AND, RenderConditionType.OR}


def _condition_type(config: dict[str, Any]) -> RenderConditionType:
    try:
        return RenderConditionType(config.get('type') or RenderConditionType.SIMPLE.value)
    except ValueError:
        return RenderConditionType.SIMPLE


def build_render_condition(config: Any, tag: str = RENDER_CONDITION_TAG) -> Optional[XmlNode]:
    if not isinstance(config, dict):
        return None

    condition_type = _condition_type(config)
    node = XmlNode(tag)
    node.set({'sling:resourceType': f'{RENDER_CONDITION_PREFIX}/{condition_type.value}'})

    if condition_type in _COMPOSITE_TYPES:
        for index, child in enumerate(config.get('conditions') or [], start=1):
            node.append(build_render_condition(child, f'cond{index}'))
        return node

    node.set_expression('expression', config.get('expression'))
    node.set({'privilege': config.get('privilege'), 'path': config.get('path')})
    return node
