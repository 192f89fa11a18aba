"""Tests for generator dispatch."""

from aem_dialog_gen.domain.enums import FieldType
from aem_dialog_gen.generator_registry import GenerationContext, GeneratorRegistry
from aem_dialog_gen.generators import (
    BaseGenerator,
    ContainerGenerator,
    GenericFieldGenerator,
    MultifieldGenerator,
    RichTextGenerator,
)
from aem_dialog_gen.markup import XmlNode
from aem_dialog_gen.naming import SequentialNameAllocator


class StarRatingGenerator(BaseGenerator):
    name_prefix = 'rating'

    def generate(self, field, context):
        name = self.resolve_name(field, context)
        node = self.start_node(name, 'myapp/components/form/rating')
        self.apply_header(node, field, name)
        return node


class TestGeneratorRegistry:

    def setup_method(self):
        self.registry = GeneratorRegistry()

    def test_every_field_type_is_supported(self):
        assert set(self.registry.get_supported_types()) == {t.value for t in FieldType}

    def test_dedicated_generators(self):
        assert isinstance(self.registry.get_generator('multifield'), MultifieldGenerator)
        assert isinstance(self.registry.get_generator('rte'), RichTextGenerator)
        assert isinstance(self.registry.get_generator('well'), ContainerGenerator)

    def test_unknown_type_falls_back_to_generic(self):
        assert isinstance(self.registry.get_generator('sparkles'), GenericFieldGenerator)

    def test_register_custom_generator(self):
        self.registry.register_generator('rating', StarRatingGenerator())
        context = GenerationContext(self.registry, SequentialNameAllocator())
        node = context.render_field({'type': 'rating', 'label': 'Stars'})
        assert node.tag == 'rating_1'
        assert node.attributes['sling:resourceType'] == 'myapp/components/form/rating'
        assert 'rating' in self.registry.get_supported_types()


class TestGenerationContext:

    def test_render_fields_keeps_order(self):
        context = GenerationContext.default()
        nodes = context.render_fields([{'name': './b'}, {'name': './a'}])
        assert [n.tag for n in nodes] == ['b', 'a']
        assert all(isinstance(n, XmlNode) for n in nodes)

    def test_default_uses_given_allocator(self):
        names = SequentialNameAllocator()
        names.allocate('field')
        context = GenerationContext.default(names)
        assert context.render_field({}).tag == 'field_2'
