import pytest

from tagcloud.exceptions import PlacementExhaustedError
from tagcloud.geometry import Point, Size
from tagcloud.layouter import CircularCloudLayouter
from tagcloud.tags import (
    FrequencyColorScheme,
    RandomColorScheme,
    WordTag,
    arrange_tags,
    build_tags,
    linear_font_size,
    make_color_scheme,
)

BLUE = (0, 0, 255, 255)


class FixedColor:
    def color_for(self, tag, index, total):
        return BLUE


class CharMeasurer:
    """10 px per character, height equal to the font size."""

    def measure(self, text, font_size):
        return Size(10 * len(text), font_size)


def test_linear_font_size_is_clamped():
    assert linear_font_size(5, 20, 60) == 25
    assert linear_font_size(100, 20, 60) == 60
    assert linear_font_size(0, 20, 60) == 20


def test_build_tags_orders_by_frequency_descending():
    tags = build_tags({"яблоко": 5, "банан": 10, "апельсин": 3}, 20, 60, FixedColor())
    assert [t.text for t in tags] == ["банан", "яблоко", "апельсин"]
    assert all(t.color == BLUE for t in tags)
    assert all(t.rectangle is None for t in tags)


def test_build_tags_uses_font_size_function():
    tags = build_tags({"тест": 5}, 20, 60, FixedColor(),
                      font_size_fn=lambda freq, lo, hi: lo + freq * 2)
    assert tags[0].font_size == 30


def test_build_tags_rejects_bad_font_range():
    with pytest.raises(ValueError):
        build_tags({"a": 1}, 60, 20, FixedColor())


def test_random_scheme_is_seeded():
    tag = WordTag("x", 1, 20)
    a = RandomColorScheme(seed=1)
    b = RandomColorScheme(seed=1)
    first = [a.color_for(tag, i, 20) for i in range(20)]
    second = [b.color_for(tag, i, 20) for i in range(20)]
    assert first == second
    assert all(c in a.palette for c in first)


def test_frequency_scheme_interpolates():
    scheme = FrequencyColorScheme((0, 0, 0, 255), (110, 220, 11, 255))
    # ratio = 10 / 20 = 0.5
    assert scheme.color_for(WordTag("w", 10, 20), 0, 1) == (55, 110, 5, 255)
    assert scheme.color_for(WordTag("w", 0, 20), 0, 1) == (0, 0, 0, 255)


def test_make_color_scheme():
    assert isinstance(make_color_scheme("Frequency"), FrequencyColorScheme)
    assert isinstance(make_color_scheme("Random", seed=3), RandomColorScheme)
    assert isinstance(make_color_scheme("Gradient"), RandomColorScheme)


def test_arrange_tags_places_most_frequent_in_center():
    tags = [WordTag("rare", 1, 20), WordTag("common", 9, 40), WordTag("mid", 4, 30)]
    layouter = CircularCloudLayouter(Point(300, 200))

    arranged = arrange_tags(tags, layouter, CharMeasurer())

    assert [t.text for t in arranged] == ["common", "mid", "rare"]
    assert arranged[0].rectangle.center() == Point(300, 200)
    assert arranged[0].rectangle.size == Size(60, 40)
    assert len(layouter) == 3


def test_arrange_tags_names_the_word_that_did_not_fit():
    layouter = CircularCloudLayouter(Point(0, 0), placement_budget=1)
    tags = [WordTag("first", 2, 20), WordTag("second", 1, 20)]

    with pytest.raises(PlacementExhaustedError, match="second"):
        arrange_tags(tags, layouter, CharMeasurer())
