"""
Customization value object tests.
"""
import pytest

from apps.orders.domain.exceptions import InvalidCustomizationError
from apps.orders.domain.value_objects import Customization, canonical_customization


class TestCustomizationNormalization:

    def test_images_are_sorted_and_deduplicated(self):
        customization = Customization(images=('b.png', 'a.png', 'b.png'))
        assert customization.images == ('a.png', 'b.png')

    def test_text_fields_are_stripped(self):
        customization = Customization(size=' M ', color='  ', custom_text='\tHello ')
        assert customization.size == 'M'
        assert customization.color is None
        assert customization.custom_text == 'Hello'

    def test_image_order_does_not_affect_equality(self):
        assert Customization(size='M', images=('x', 'y')) == Customization(size='M', images=('y', 'x', 'x'))

    def test_all_empty_customization_becomes_none(self):
        assert Customization.from_dict({'size': '', 'color': None, 'images': []}) is None
        assert Customization.from_dict(None) is None
        assert Customization.from_dict({}) is None

    def test_canonical_form_is_compact_json_with_sorted_keys(self):
        customization = Customization(size='M', color='red')
        assert customization.canonical() == (
            '{"color":"red","custom_text":null,"images":[],"size":"M"}'
        )

    def test_absent_customization_has_empty_canonical_form(self):
        assert canonical_customization(None) == ''


class TestCustomizationLimits:

    def test_rejects_more_than_five_images(self):
        with pytest.raises(InvalidCustomizationError) as exc_info:
            Customization(images=tuple(f'img-{i}.png' for i in range(6)))
        assert 'customization.images' in exc_info.value.errors

    def test_duplicate_images_count_once_toward_the_limit(self):
        images = ('a.png',) * 3 + ('b.png', 'c.png', 'd.png', 'e.png')
        assert len(Customization(images=images).images) == 5

    def test_rejects_long_size_and_text(self):
        with pytest.raises(InvalidCustomizationError) as exc_info:
            Customization(size='x' * 51, custom_text='y' * 501)
        assert set(exc_info.value.errors) == {'customization.size', 'customization.custom_text'}

    def test_rejects_blank_image_reference(self):
        with pytest.raises(InvalidCustomizationError):
            Customization(images=('ok.png', '  '))

    def test_rejects_non_list_images(self):
        with pytest.raises(InvalidCustomizationError):
            Customization.from_dict({'images': 'a.png'})
