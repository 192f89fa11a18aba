"""Generator registry for dialog field types."""

from typing import Any, Optional

from aem_dialog_gen.generators.base_generator import BaseGenerator
from aem_dialog_gen.generators.generic_field_generator import GenericFieldGenerator
from aem_dialog_gen.markup import XmlNode
from aem_dialog_gen.naming import NameAllocator, SequentialNameAllocator


class GeneratorRegistry:
    """Registry mapping field types to generator instances.

    Types without a dedicated generator, including unknown ones, are handled
    by the generic field generator.
    """

    def __init__(self):
        self._generators: dict[str, BaseGenerator] = {}
        self._generic_generator = GenericFieldGenerator()
        self._register_default_generators()

    def _register_default_generators(self) -> None:
        from aem_dialog_gen.domain.enums import FieldType
        from aem_dialog_gen.generators.choice_generators import AutocompleteGenerator, RadioGroupGenerator
        from aem_dialog_gen.generators.container_generators import ContainerGenerator, FixedColumnsGenerator
        from aem_dialog_gen.generators.multifield_generator import MultifieldGenerator
        from aem_dialog_gen.generators.picker_generators import (
            AssetPickerGenerator,
            ContentFragmentPickerGenerator,
            ExperienceFragmentPickerGenerator,
            ImageGenerator,
            PageFieldGenerator,
            TagsGenerator,
        )
        from aem_dialog_gen.generators.rte_generator import RichTextGenerator
        from aem_dialog_gen.generators.static_generators import ButtonGenerator, StaticGenerator

        self.register_generator(FieldType.MULTIFIELD.value, MultifieldGenerator())
        self.register_generator(FieldType.FIELDSET.value, ContainerGenerator(FieldType.FIELDSET))
        self.register_generator(FieldType.CONTAINER.value, ContainerGenerator(FieldType.CONTAINER))
        self.register_generator(FieldType.WELL.value, ContainerGenerator(FieldType.WELL))
        self.register_generator(FieldType.FIXEDCOLUMNS.value, FixedColumnsGenerator())
        self.register_generator(FieldType.HEADING.value, StaticGenerator(FieldType.HEADING))
        self.register_generator(FieldType.TEXT.value, StaticGenerator(FieldType.TEXT))
        self.register_generator(FieldType.ALERT.value, StaticGenerator(FieldType.ALERT))
        self.register_generator(FieldType.TAGS.value, TagsGenerator())
        self.register_generator(FieldType.IMAGE.value, ImageGenerator())
        self.register_generator(FieldType.AUTOCOMPLETE.value, AutocompleteGenerator())
        self.register_generator(FieldType.RADIOGROUP.value, RadioGroupGenerator())
        self.register_generator(FieldType.PAGEFIELD.value, PageFieldGenerator())
        self.register_generator(FieldType.CONTENTFRAGMENTPICKER.value, ContentFragmentPickerGenerator())
        self.register_generator(FieldType.EXPERIENCEFRAGMENTPICKER.value, ExperienceFragmentPickerGenerator())
        self.register_generator(FieldType.ASSETPICKER.value, AssetPickerGenerator())
        self.register_generator(FieldType.RTE.value, RichTextGenerator())
        self.register_generator(FieldType.BUTTON.value, ButtonGenerator())

        for generic_type in (
            FieldType.TEXTFIELD, FieldType.TEXTAREA, FieldType.SELECT, FieldType.CHECKBOX,
            FieldType.NUMBERFIELD, FieldType.PATHFIELD, FieldType.COLORFIELD,
            FieldType.DATEPICKER, FieldType.HIDDEN, FieldType.SWITCH, FieldType.FILEUPLOAD,
        ):
            self.register_generator(generic_type.value, self._generic_generator)

    def get_generator(self, field_type: str) -> BaseGenerator:
        return self._generators.get(field_type, self._generic_generator)

    def register_generator(self, field_type: str, generator: BaseGenerator) -> None:
        self._generators[field_type] = generator

    def get_supported_types(self) -> list[str]:
        return list(self._generators.keys())


class GenerationContext:
    """What a generator needs to render nested fields.

    One context is created per dialog, so the name allocator's counters
    start fresh for every dialog.
    """

    def __init__(self, registry: GeneratorRegistry, names: NameAllocator):
        self.registry = registry
        self.names = names

    @classmethod
    def default(cls, names: Optional[NameAllocator] = None) -> 'GenerationContext':
        return cls(GeneratorRegistry(), names or SequentialNameAllocator())

    def render_field(self, field: dict[str, Any]) -> XmlNode:
        field_type = field.get('type') or 'textfield'
        return self.registry.get_generator(field_type).generate(field, self)

    def render_fields(self, fields: list[dict[str, Any]]) -> list[XmlNode]:
        return [self.render_field(field) for field in fields]
