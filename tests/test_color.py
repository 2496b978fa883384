import pytest

from term_gif.color import AttributeInfo, Color


class TestColor:
    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="'r'"):
            Color(value, 0, 0)
        with pytest.raises(ValueError, match="'g'"):
            Color(0, value, 0)
        with pytest.raises(ValueError, match="'b'"):
            Color(0, 0, value)
        with pytest.raises(ValueError, match="'a'"):
            Color(0, 0, 0, value)

    @pytest.mark.parametrize("value", [0, 127, 255])
    class TestInRange:
        def test_r(self, value):
            color = Color(value, 0, 0)
            assert color.r == value

        def test_g(self, value):
            color = Color(0, value, 0)
            assert color.g == value

        def test_b(self, value):
            color = Color(0, 0, value)
            assert color.b == value

        def test_a(self, value):
            color = Color(0, 0, 0, value)
            assert color.a == value

    def test_a_default(self):
        color = Color(0, 0, 0)
        assert color.a == 255

    def test_is_tuple(self):
        color = Color(255, 127, 1, 0)
        assert isinstance(color, tuple)
        assert len(color) == 4
        assert color == (255, 127, 1, 0)

    @pytest.mark.parametrize(
        "rgba,rgb",
        [
            ((0, 0, 0, 0), (0, 0, 0)),
            ((0, 10, 127, 255), (0, 10, 127)),
            ((255, 255, 255, 255), (255, 255, 255)),
        ],
    )
    def test_rgb(self, rgba, rgb):
        assert Color(*rgba).rgb == rgb

    @pytest.mark.parametrize("a,transparent", [(0, True), (1, False), (255, False)])
    def test_transparent(self, a, transparent):
        assert Color(10, 20, 30, a).transparent is transparent

    class TestLuma:
        @pytest.mark.parametrize(
            "rgb,luma",
            [
                ((0, 0, 0), 0),
                ((255, 255, 255), 255),
                ((255, 0, 0), 76),
                ((0, 255, 0), 150),
                ((0, 0, 255), 29),
                ((128, 128, 128), 128),
            ],
        )
        def test_value(self, rgb, luma):
            assert Color(*rgb).luma == luma

        def test_grays_are_unchanged(self):
            for value in range(256):
                assert Color(value, value, value).luma == value

        def test_alpha_ignored(self):
            assert Color(200, 100, 50, 0).luma == Color(200, 100, 50, 255).luma

    class TestFromRGBA16:
        def test_high_byte(self):
            assert Color.from_rgba16(0xFFFF, 0x8000, 0x00FF, 0) == Color(255, 128, 0, 0)

        def test_a_default(self):
            assert Color.from_rgba16(0, 0, 0).a == 255

        def test_instance_type(self):
            assert type(Color.from_rgba16(0, 0, 0)) is Color

        @pytest.mark.parametrize("value", [-1, 0x10000])
        def test_out_of_range(self, value):
            for index, name in enumerate("rgba"):
                channels = [0] * 4
                channels[index] = value
                with pytest.raises(ValueError, match=f"'{name}'"):
                    Color.from_rgba16(*channels)

    class TestNew:
        def test_instance_type(self):
            class SubColor(Color):
                pass

            assert type(Color._new(1, 1, 1)) is Color
            assert type(SubColor._new(1, 1, 1)) is SubColor

        @pytest.mark.parametrize("rgba", [(0, 0, 0, 0), (1, 2, 3, 4), (255,) * 4])
        def test_equal_to_normally_constructed(self, rgba):
            assert Color._new(*rgba) == Color(*rgba)


def test_attribute_info():
    info = AttributeInfo(197, False)
    assert info == (197, False)
    assert info.attr == 197
    assert info.transparent is False
