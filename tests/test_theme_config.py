from __future__ import annotations

import unittest

from chartdraw.config import DEFAULT_CONFIG, load_render_config
from chartdraw.geometry import Box
from chartdraw.theme import DARK_THEME, DEFAULT_SERIES_COLORS, LIGHT_THEME, get_theme, validate_theme_tokens


class ThemeTests(unittest.TestCase):
    def test_named_themes(self) -> None:
        self.assertIs(get_theme("light"), LIGHT_THEME)
        self.assertIs(get_theme("dark"), DARK_THEME)
        with self.assertRaisesRegex(ValueError, "Unknown theme"):
            get_theme("solarized")

    def test_series_color_wraps_palette(self) -> None:
        n = len(DEFAULT_SERIES_COLORS)
        self.assertEqual(LIGHT_THEME.get_series_color(0), (0x54, 0x70, 0xC6, 255))
        self.assertEqual(LIGHT_THEME.get_series_color(n), LIGHT_THEME.get_series_color(0))
        self.assertEqual(LIGHT_THEME.get_series_color(n + 2), LIGHT_THEME.get_series_color(2))

    def test_token_overrides(self) -> None:
        theme = validate_theme_tokens({"text_color": "#112233", "series_colors": ["#000000"]})
        self.assertEqual(theme.get_text_color(), (0x11, 0x22, 0x33, 255))
        self.assertEqual(theme.get_series_color(5), (0, 0, 0, 255))
        self.assertEqual(theme.background_color, LIGHT_THEME.background_color)

    def test_token_overrides_keep_base(self) -> None:
        theme = validate_theme_tokens({"text_color": "#112233"}, base=DARK_THEME)
        self.assertEqual(theme.background_color, DARK_THEME.background_color)

    def test_invalid_tokens(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme token"):
            validate_theme_tokens({"grid_color": "#000000"})
        with self.assertRaisesRegex(ValueError, "must be a hex color"):
            validate_theme_tokens({"text_color": "black"})
        with self.assertRaisesRegex(ValueError, "non-empty list"):
            validate_theme_tokens({"series_colors": []})
        with self.assertRaisesRegex(ValueError, "non-empty list"):
            validate_theme_tokens({"series_colors": "#000000"})


class RenderConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(load_render_config(), DEFAULT_CONFIG)
        self.assertEqual(DEFAULT_CONFIG.padding_box(), Box(left=10, top=10, right=10, bottom=10))

    def test_overrides(self) -> None:
        config = load_render_config({"type": "png", "width": 320, "height": 200, "padding": 4, "theme": "dark"})
        self.assertEqual((config.type, config.width, config.height), ("png", 320, 200))
        self.assertEqual(config.padding, (4, 4, 4, 4))
        self.assertEqual(config.theme, "dark")

    def test_padding_sides(self) -> None:
        config = load_render_config({"padding": [1, 2, 3, 4]})
        self.assertEqual(config.padding_box(), Box(left=1, top=2, right=3, bottom=4))

    def test_invalid_options(self) -> None:
        cases = [
            ({"colour": "red"}, "Unknown render option"),
            ({"type": "gif"}, "Option `type`"),
            ({"width": 0}, "Option `width`"),
            ({"height": "400"}, "Option `height`"),
            ({"width": True}, "Option `width`"),
            ({"padding": [1, 2]}, "Option `padding`"),
            ({"padding": [1, 2, -3, 4]}, "non-negative"),
            ({"theme": "blue"}, "Unknown theme"),
            ({"font_family": 12}, "font_family"),
        ]
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaisesRegex(ValueError, message):
                    load_render_config(overrides)


if __name__ == "__main__":
    unittest.main()
