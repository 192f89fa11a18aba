"""Shared test fixtures."""

import json
import os

import pytest

from aem_dialog_gen.generator_registry import GenerationContext


# ── Sample Dialog Configs ────────────────────────────────────────────────

HERO_DIALOG = {
    'title': 'Hero Banner',
    'tabs': [
        {
            'title': 'Content',
            'fields': [
                {'type': 'textfield', 'name': './title', 'label': 'Title', 'required': True},
                {'type': 'textarea', 'name': './subtitle', 'label': 'Subtitle'},
                {
                    'type': 'select',
                    'name': './variant',
                    'label': 'Variant',
                    'options': [
                        {'value': 'light', 'text': 'Light'},
                        {'value': 'dark', 'text': 'Dark'},
                    ],
                },
            ],
        },
        {
            'title': 'Links',
            'fields': [
                {
                    'type': 'multifield',
                    'name': './links',
                    'label': 'Links',
                    'composite': True,
                    'maxItems': 4,
                    'fields': [
                        {'type': 'textfield', 'name': './text', 'label': 'Text'},
                        {'type': 'pathfield', 'name': './link', 'label': 'Link', 'rootPath': '/content'},
                    ],
                },
            ],
        },
    ],
}

TEASER_DIALOG = {
    'layout': 'simple',
    'fields': [
        {'type': 'textfield', 'name': './headline', 'label': 'Headline & Intro'},
        {'type': 'checkbox', 'name': './showImage', 'label': 'Show image', 'defaultValue': True},
    ],
}

SETTINGS_DIALOG = {
    'layout': 'accordion',
    'tabs': [
        {'title': 'General', 'fields': [{'type': 'textfield', 'name': './title', 'label': 'Title'}]},
        {'title': 'Advanced', 'active': True, 'fields': [{'type': 'textfield', 'name': './cssClass'}]},
    ],
}

BROKEN_MULTIFIELD_DIALOG = {
    'fields': [{'type': 'multifield', 'name': './items', 'minItems': 5, 'maxItems': 3}],
}


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def render_field():
    """Render one field config on its own, starting at indentation level 0."""
    def _render(field, names=None):
        context = GenerationContext.default(names)
        return context.render_field(field).render()
    return _render


@pytest.fixture
def context():
    return GenerationContext.default()


def _write_component(source_dir, name, content, file_name='dialog.json'):
    component_dir = os.path.join(source_dir, name)
    os.makedirs(component_dir, exist_ok=True)
    if content is None:
        return
    with open(os.path.join(component_dir, file_name), 'w', encoding='utf-8') as f:
        f.write(content if isinstance(content, str) else json.dumps(content))


@pytest.fixture
def source_tree(tmp_path):
    """Component source folder: three valid dialogs, one folder without a
    config, one invalid JSON file and one multifield with bad bounds.
    """
    source_dir = str(tmp_path / "components")
    os.makedirs(source_dir)

    _write_component(source_dir, 'hero', HERO_DIALOG)
    _write_component(source_dir, 'teaser', TEASER_DIALOG)
    _write_component(source_dir, 'settings', SETTINGS_DIALOG)
    _write_component(source_dir, 'spacer', None)
    _write_component(source_dir, 'broken', '{"title": ')
    _write_component(source_dir, 'carousel', BROKEN_MULTIFIELD_DIALOG)

    # Stray files next to component folders are ignored
    with open(os.path.join(source_dir, 'README.md'), 'w') as f:
        f.write('not a component')

    return source_dir
