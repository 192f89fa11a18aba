"""Tests for pickers, choice fields, static nodes, buttons and the rich text editor."""

import pytest


class TestStaticNodes:

    def test_heading_default_level(self, render_field):
        xml = render_field({'type': 'heading', 'text': 'Advanced Settings'})
        assert 'sling:resourceType="granite/ui/components/coral/foundation/heading"' in xml
        assert 'text="Advanced Settings"' in xml
        assert 'level="{Long}3"' in xml
        assert xml.startswith('<heading_1\n')
        assert 'name=' not in xml

    def test_heading_level(self, render_field):
        assert 'level="{Long}2"' in render_field({'type': 'heading', 'text': 'Title', 'level': 2})

    def test_text(self, render_field):
        xml = render_field({'type': 'text', 'text': 'This is an informational message'})
        assert 'sling:resourceType="granite/ui/components/coral/foundation/text"' in xml
        assert 'text="This is an informational message"' in xml

    @pytest.mark.parametrize('variant', ['info', 'success', 'warning', 'error'])
    def test_alert_variants(self, render_field, variant):
        xml = render_field({'type': 'alert', 'title': 'Heads up', 'text': 'Message', 'variant': variant})
        assert 'sling:resourceType="granite/ui/components/coral/foundation/alert"' in xml
        assert 'jcr:title="Heads up"' in xml
        assert f'variant="{variant}"' in xml

    def test_button_defaults(self, render_field):
        xml = render_field({'type': 'button', 'text': 'Save'})
        assert 'sling:resourceType="granite/ui/components/coral/foundation/button"' in xml
        assert 'text="Save"' in xml
        assert 'variant="primary"' in xml

    def test_button_custom(self, render_field):
        xml = render_field({
            'type': 'button', 'name': 'clearBtn', 'text': 'Clear',
            'variant': 'secondary', 'icon': 'close', 'command': 'generateContent',
        })
        assert xml.startswith('<clearBtn\n')
        assert 'variant="secondary"' in xml
        assert 'icon="close"' in xml
        assert 'command="generateContent"' in xml

    def test_button_handler(self, render_field):
        xml = render_field({'type': 'button', 'text': 'Preview', 'handler': 'preview.js'})
        assert xml.startswith('<button_1\n')
        assert '    <granite:data\n' in xml
        assert '        handler="preview.js"/>\n' in xml
        assert 'granite:data=' not in xml
        assert xml.endswith('</button_1>\n')


class TestPickers:

    def test_tags(self, render_field):
        xml = render_field({'type': 'tags', 'name': './cq:tags', 'label': 'Tags', 'multiple': True})
        assert 'sling:resourceType="cq/gui/components/coral/common/form/tagfield"' in xml
        assert 'name="./cq:tags"' in xml
        assert 'rootPath="/content/cq:tags"' in xml
        assert 'multiple="{Boolean}true"' in xml

    def test_tags_custom_root(self, render_field):
        xml = render_field({'type': 'tags', 'name': './t', 'rootPath': '/content/cq:tags/myapp'})
        assert 'rootPath="/content/cq:tags/myapp"' in xml
        assert xml.count('rootPath=') == 1

    @pytest.mark.parametrize('field_type, resource_type, root_path', [
        ('pagefield', 'cq/gui/components/siteadmin/admin/searchpanel/searchpredicates/pathpredicate', '/content'),
        ('contentfragmentpicker', 'dam/cfm/components/authoring/contentfragment', '/content/dam'),
        ('experiencefragmentpicker', 'cq/experience-fragments/editor/components/experiencefragment',
         '/content/experience-fragments'),
        ('assetpicker', 'granite/ui/components/coral/foundation/form/pathfield', '/content/dam'),
    ])
    def test_picker_defaults(self, render_field, field_type, resource_type, root_path):
        xml = render_field({'type': field_type, 'name': './target', 'label': 'Target', 'required': True})
        assert f'sling:resourceType="{resource_type}"' in xml
        assert f'rootPath="{root_path}"' in xml
        assert 'fieldLabel="Target"' in xml
        assert 'required="{Boolean}true"' in xml

    def test_page_filter(self, render_field):
        xml = render_field({'type': 'pagefield', 'name': './p', 'filter': 'hierarchyNotFile'})
        assert 'filter="hierarchyNotFile"' in xml

    def test_fragment_model(self, render_field):
        xml = render_field({
            'type': 'contentfragmentpicker', 'name': './fragmentPath',
            'fragmentModel': '/conf/mysite/settings/dam/cfm/models/article',
        })
        assert 'fragmentPath="/conf/mysite/settings/dam/cfm/models/article"' in xml
        assert 'fragmentModel' not in xml

    def test_asset_picker(self, render_field):
        xml = render_field({
            'type': 'assetpicker', 'name': './asset',
            'mimeTypes': ['video/mp4', 'video/webm'], 'filter': 'folder', 'forceIgnoreFreshness': True,
        })
        assert 'mimeTypes="[video/mp4,video/webm]"' in xml
        assert 'filter="folder"' in xml
        assert 'forceIgnoreFreshness="{Boolean}true"' in xml

    def test_image_defaults(self, render_field):
        xml = render_field({'type': 'image', 'name': './image', 'label': 'Image'})
        assert 'sling:resourceType="cq/gui/components/authoring/dialog/fileupload"' in xml
        assert 'allowUpload="{Boolean}true"' in xml
        assert 'fileNameParameter="./fileName"' in xml
        assert 'fileReferenceParameter="./fileReference"' in xml
        assert 'mimeTypes="[image/gif,image/jpeg,image/png,image/webp,image/tiff,image/svg+xml]"' in xml

    def test_image_overrides(self, render_field):
        xml = render_field({
            'type': 'image', 'name': './image', 'allowUpload': False, 'uploadUrl': '/content/dam/mysite',
            'fileNameParameter': './imageName', 'fileReferenceParameter': './imageRef',
            'mimeTypes': ['image/png', 'image/svg+xml'],
        })
        assert 'allowUpload="{Boolean}false"' in xml
        assert 'uploadUrl="/content/dam/mysite"' in xml
        assert 'fileNameParameter="./imageName"' in xml
        assert 'fileReferenceParameter="./imageRef"' in xml
        assert 'mimeTypes="[image/png,image/svg+xml]"' in xml


class TestChoiceFields:

    def test_autocomplete_defaults(self, render_field):
        xml = render_field({'type': 'autocomplete', 'name': './product', 'label': 'Select Product'})
        assert 'sling:resourceType="granite/ui/components/coral/foundation/form/autocomplete"' in xml
        assert 'forceSelection="{Boolean}true"' in xml

    def test_autocomplete_options(self, render_field):
        xml = render_field({
            'type': 'autocomplete', 'name': './tags', 'multiple': True, 'required': True,
            'forceSelection': False, 'datasource': '/apps/mysite/datasources/categories',
        })
        assert 'multiple="{Boolean}true"' in xml
        assert 'forceSelection="{Boolean}false"' in xml
        assert '    <datasource\n' in xml
        assert 'sling:resourceType="/apps/mysite/datasources/categories"' in xml

    def test_radiogroup(self, render_field):
        xml = render_field({
            'type': 'radiogroup', 'name': './layout', 'label': 'Layout', 'vertical': True,
            'options': [{'value': 'grid', 'text': 'Grid', 'checked': True}, {'value': 'list', 'text': 'List'}],
        })
        assert 'sling:resourceType="granite/ui/components/coral/foundation/form/radiogroup"' in xml
        assert 'vertical="{Boolean}true"' in xml
        assert '        <grid\n' in xml
        assert '        <list\n' in xml
        assert xml.count('checked="{Boolean}true"') == 1
        assert 'options=' not in xml


class TestRichText:

    def test_default_features(self, render_field):
        xml = render_field({'type': 'rte', 'name': './text', 'label': 'Content', 'features': ['*']})
        assert 'sling:resourceType="cq/gui/components/authoring/dialog/richtext"' in xml
        assert '    <rtePlugins jcr:primaryType="nt:unstructured">\n' in xml
        assert 'features="bold,italic,underline"' in xml
        for family in ('format', 'justify', 'lists', 'links', 'subsuperscript', 'paraformat'):
            assert f'        <{family}\n' in xml
        assert 'description="Heading 3"' in xml

    def test_features_default_to_all(self, render_field):
        assert '<paraformat' in render_field({'type': 'rte', 'name': './text'})

    def test_specific_features_merge_per_family(self, render_field):
        xml = render_field({'type': 'rte', 'name': './text', 'features': ['bold', 'italic', 'links', 'unknown']})
        assert xml.count('        <format\n') == 1
        assert 'features="bold,italic"' in xml
        assert 'features="modifylink,unlink"' in xml
        assert '<paraformat' not in xml
        assert 'features=' in xml and 'features="[' not in xml

    def test_default_name(self, render_field):
        xml = render_field({'type': 'rte', 'label': 'Body'})
        assert xml.startswith('<text\n')
        assert 'name="./text"' in xml

    def test_inline_toolbar(self, render_field):
        xml = render_field({'type': 'rte', 'name': './text', 'useFixedInlineToolbar': True})
        assert 'useFixedInlineToolbar="{Boolean}true"' in xml
        assert '<uiSettings jcr:primaryType="nt:unstructured">' in xml
        assert 'toolbar="[format#bold,format#italic,format#underline,#justify,#lists,' \
               'links#modifylink,links#unlink,fullscreen#start]"' in xml
        assert 'command="bullist"' in xml
