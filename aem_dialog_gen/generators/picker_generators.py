"""Generators for fields that pick repository content: tags, pages, fragments, assets, images."""

from typing import Any

from aem_dialog_gen.domain.constants import DEFAULT_IMAGE_MIME_TYPES, DEFAULT_ROOT_PATHS, RESOURCE_TYPES
from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generators.base_generator import HEADER_KEYS, BaseGenerator
from aem_dialog_gen.markup import XmlNode


class PickerGenerator(BaseGenerator):
    """Header, ``rootPath`` (with a per-kind default), kind-specific attributes."""

    kind = FieldType.PAGEFIELD
    extra_keys: frozenset[str] = frozenset()

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        name = self.resolve_name(field, context)
        node = self.start_node(name, RESOURCE_TYPES[self.kind.value])
        self.apply_header(node, field, name)
        node.set({'rootPath': field.get('rootPath') or DEFAULT_ROOT_PATHS[self.kind.value]})
        self.add_attributes(node, field)
        self.apply_remaining(node, field, HEADER_KEYS | {'rootPath'} | self.extra_keys)
        return node

    def add_attributes(self, node: XmlNode, field: dict[str, Any]) -> None:
        pass


class TagsGenerator(PickerGenerator):
    kind = FieldType.TAGS
    extra_keys = frozenset({'multiple'})

    def add_attributes(self, node, field):
        node.set_flags({'multiple': field.get('multiple')})


class PageFieldGenerator(PickerGenerator):
    kind = FieldType.PAGEFIELD
    extra_keys = frozenset({'filter'})

    def add_attributes(self, node, field):
        node.set({'filter': field.get('filter')})


class ContentFragmentPickerGenerator(PickerGenerator):
    kind = FieldType.CONTENTFRAGMENTPICKER
    extra_keys = frozenset({'fragmentModel'})

    def add_attributes(self, node, field):
        node.set({'fragmentPath': field.get('fragmentModel')})


class ExperienceFragmentPickerGenerator(PickerGenerator):
    kind = FieldType.EXPERIENCEFRAGMENTPICKER


class AssetPickerGenerator(PickerGenerator):
    kind = FieldType.ASSETPICKER
    extra_keys = frozenset({'mimeTypes', 'filter', 'forceIgnoreFreshness'})

    def add_attributes(self, node, field):
        node.set({'mimeTypes': field.get('mimeTypes'), 'filter': field.get('filter')})
        node.set_flags({'forceIgnoreFreshness': field.get('forceIgnoreFreshness')})


class ImageGenerator(BaseGenerator):
    """File upload bound to a DAM reference, with image defaults."""

    consumed = HEADER_KEYS | {
        'allowUpload', 'fileNameParameter', 'fileReferenceParameter',
        'mimeTypes', 'uploadUrl', 'multiple',
    }

    def generate(self, field: dict[str, Any], context) -> XmlNode:
        name = self.resolve_name(field, context)
        node = self.start_node(name, RESOURCE_TYPES[FieldType.IMAGE.value])
        self.apply_header(node, field, name)

        allow_upload = field.get('allowUpload')
        node.set({
            'allowUpload': True if allow_upload is None else allow_upload,
            'fileNameParameter': field.get('fileNameParameter') or './fileName',
            'fileReferenceParameter': field.get('fileReferenceParameter') or './fileReference',
            'mimeTypes': field.get('mimeTypes') or DEFAULT_IMAGE_MIME_TYPES,
            'uploadUrl': field.get('uploadUrl'),
        }, allow_falsy=True)
        node.set_flags({'multiple': field.get('multiple')})
        self.apply_remaining(node, field, self.consumed)
        return node
