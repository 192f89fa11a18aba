"""Field generators, one per dialog field kind."""

from aem_dialog_gen.generators.base_generator import BaseGenerator
from aem_dialog_gen.generators.choice_generators import AutocompleteGenerator, RadioGroupGenerator
from aem_dialog_gen.generators.container_generators import ContainerGenerator, FixedColumnsGenerator
from aem_dialog_gen.generators.generic_field_generator import GenericFieldGenerator
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

__all__ = [
    'BaseGenerator', 'GenericFieldGenerator', 'ContainerGenerator',
    'FixedColumnsGenerator', 'MultifieldGenerator', 'TagsGenerator',
    'ImageGenerator', 'PageFieldGenerator', 'ContentFragmentPickerGenerator',
    'ExperienceFragmentPickerGenerator', 'AssetPickerGenerator',
    'AutocompleteGenerator', 'RadioGroupGenerator', 'StaticGenerator',
    'ButtonGenerator', 'RichTextGenerator',
]
