"""Tests for ccp_color.core.parser — component and hex colour construction."""

import math

import pytest
from ccp_color.core.errors import ColorError, InvalidHexFormat, InvalidValueCount, NonFiniteComponent
from ccp_color.core.parser import from_components, from_hex, from_rgba, or_default
from ccp_color.core.types import ColorValue


class TestFromComponents:
    def test_divides_rgb_by_255(self):
        assert from_components([255, 0, 0, 1.0]) == ColorValue(1.0, 0.0, 0.0, 1.0)

    def test_keep_raw_stores_values_as_given(self):
        assert from_components([255, 0, 0, 1.0], keep_raw=True) == ColorValue(255.0, 0.0, 0.0, 1.0)

    def test_alpha_never_divided(self):
        color = from_components([0, 0, 0, 0.5])
        assert color.alpha == 0.5

    def test_mid_grey(self):
        color = from_components([51, 102, 204, 1])
        assert color.red == pytest.approx(0.2)
        assert color.green == pytest.approx(0.4)
        assert color.blue == pytest.approx(0.8)

    def test_accepts_tuple(self):
        assert from_components((0, 255, 0, 1)) == ColorValue(0.0, 1.0, 0.0, 1.0)

    def test_three_values_rejected(self):
        with pytest.raises(InvalidValueCount) as exc:
            from_components([1, 2, 3])
        assert exc.value.value == [1, 2, 3]

    def test_five_values_rejected(self):
        with pytest.raises(InvalidValueCount):
            from_components([1, 2, 3, 4, 5])

    def test_empty_rejected(self):
        with pytest.raises(InvalidValueCount):
            from_components([])


class TestFromRgba:
    def test_defaults_to_clear(self):
        assert from_rgba() == ColorValue.clear()

    def test_normalizes(self):
        assert from_rgba(255, 255, 255, 1) == ColorValue.white()

    def test_keep_raw(self):
        assert from_rgba(0.5, 0.25, 1, 0.3, keep_raw=True) == ColorValue(0.5, 0.25, 1.0, 0.3)

    @pytest.mark.parametrize(
        'values',
        [(math.nan, 0, 0, 1), (0, math.inf, 0, 1), (0, 0, -math.inf, 1), (0, 0, 0, math.nan)],
    )
    def test_non_finite_rejected(self, values):
        with pytest.raises(NonFiniteComponent):
            from_rgba(*values)
        with pytest.raises(NonFiniteComponent):
            from_rgba(*values, keep_raw=True)

    def test_non_finite_components_rejected(self):
        with pytest.raises(NonFiniteComponent) as exc:
            from_components([math.nan, 0, 0, math.inf])
        assert len(exc.value.value) == 4

    def test_non_finite_falls_back_with_or_default(self):
        assert or_default(from_components, [math.inf, 0, 0, 1]) == ColorValue.white()


class TestFromHex:
    def test_six_digits(self):
        color = from_hex('#2563eb')
        assert color.red == 37 / 255.0
        assert color.green == 99 / 255.0
        assert color.blue == 235 / 255.0
        assert color.alpha == 1.0

    def test_no_hash(self):
        assert from_hex('ff0000') == ColorValue(1.0, 0.0, 0.0, 1.0)

    def test_uppercase(self):
        assert from_hex('#FFFFFF') == ColorValue.white()

    def test_short_form_expands(self):
        assert from_hex('ABC') == from_hex('AABBCC')

    def test_short_form_with_hash(self):
        assert from_hex('#fff') == ColorValue.white()

    def test_black(self):
        assert from_hex('000000') == ColorValue(0.0, 0.0, 0.0, 1.0)

    def test_channels_within_unit_range(self):
        for value in ['000000', '123456', '7f7f7f', 'abcdef', 'ffffff', '0a0b0c']:
            color = from_hex(value)
            for channel in (color.red, color.green, color.blue):
                assert 0.0 <= channel <= 1.0
            assert color.alpha == 1.0

    @pytest.mark.parametrize('value', ['1', '12', '1234', '12345', '1234567', '', '#', '#12345678'])
    def test_bad_length_rejected(self, value):
        with pytest.raises(InvalidHexFormat):
            from_hex(value)

    @pytest.mark.parametrize('value', ['12G456', 'xyz', '#12345g', '+12345', '-12', ' 12345', '1_2345', '0x1234'])
    def test_non_hex_rejected(self, value):
        with pytest.raises(InvalidHexFormat):
            from_hex(value)

    def test_error_carries_input(self):
        with pytest.raises(InvalidHexFormat) as exc:
            from_hex('#12G')
        assert exc.value.value == '#12G'
        assert '#12G' in str(exc.value)


class TestOrDefault:
    def test_success_passes_through(self):
        assert or_default(from_hex, '#000000') == ColorValue(0.0, 0.0, 0.0, 1.0)

    def test_failure_returns_white(self):
        assert or_default(from_hex, 'zz') == ColorValue.white()

    def test_custom_default(self):
        fallback = ColorValue(0.1, 0.2, 0.3, 0.4)
        assert or_default(from_components, [1, 2], default=fallback) is fallback

    def test_forwards_kwargs(self):
        assert or_default(from_components, [255, 0, 0, 1], keep_raw=True) == ColorValue(255.0, 0.0, 0.0, 1.0)

    def test_other_errors_propagate(self):
        def boom():
            raise RuntimeError('not a colour problem')

        with pytest.raises(RuntimeError):
            or_default(boom)

    def test_catches_whole_family(self):
        def fail():
            raise ColorError('anything')

        assert or_default(fail) == ColorValue.white()
