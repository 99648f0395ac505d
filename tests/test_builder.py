#!/usr/bin/env python3
"""Unit tests for the builder demo."""

import unittest
from unittest.mock import MagicMock, call

from widgetkit.platforms import Platform
from widgetkit.builder import (
    Window, WindowBuilder,
    WindowsWindow, WindowsWindowBuilder,
    MacOSWindow, MacOSWindowBuilder,
    WindowCreationManager,
    client_code, build_both_recipes,
)

MACOS_DEFAULT_STRUCTURE = (
    "Window: Standard MacOS; Menubar: MacOS default; Window title: New Window;"
    "Background color: MacOS default; "
)
WINDOWS_DEFAULT_STRUCTURE = (
    "Window: Standard Windows; Menubar: Windows default; Window title: New Window;"
    "Background color: Windows default; "
)


class TestWindowBuilders(unittest.TestCase):
    """Test the concrete window builders."""

    def test_new_builder_has_empty_window(self):
        """Test a fresh builder starts with an empty product."""
        window = MacOSWindowBuilder().get_window()

        self.assertIsInstance(window, MacOSWindow)
        self.assertEqual(window.structure, "")

    def test_steps_in_documented_order(self):
        """Test all four steps produce their fragments in order."""
        builder = WindowsWindowBuilder()

        builder.create_native_window()
        builder.add_menubar()
        builder.set_title("Editor")
        builder.set_default_background_color()
        window = builder.get_window()

        self.assertIsInstance(window, WindowsWindow)
        self.assertEqual(
            window.structure,
            "Window: Standard Windows; Menubar: Windows default; Window title: Editor;"
            "Background color: Windows default; "
        )

    def test_steps_in_any_order(self):
        """Test steps append in the order they are called."""
        builder = MacOSWindowBuilder()

        builder.set_default_background_color()
        builder.set_title("X")

        self.assertEqual(
            builder.get_window().structure,
            "Background color: MacOS default; Window title: X;"
        )

    def test_title_used_verbatim(self):
        """Test the title is not trimmed or escaped."""
        builder = MacOSWindowBuilder()
        builder.set_title("  a; b  ")

        self.assertEqual(builder.get_window().structure, "Window title:   a; b  ;")

    def test_reset_discards_progress(self):
        """Test reset leaves an empty product."""
        builder = WindowsWindowBuilder()
        builder.create_native_window()
        builder.add_menubar()

        builder.reset()

        self.assertEqual(builder.get_window().structure, "")

    def test_get_window_transfers_ownership(self):
        """Test a taken window is not modified by later steps."""
        builder = MacOSWindowBuilder()
        builder.create_native_window()

        taken = builder.get_window()
        builder.add_menubar()

        self.assertEqual(taken.structure, "Window: Standard MacOS; ")
        self.assertEqual(builder.get_window().structure, "Menubar: MacOS default; ")

    def test_get_window_never_returns_same_product_twice(self):
        """Test each call hands out a distinct window."""
        builder = WindowsWindowBuilder()

        first = builder.get_window()
        second = builder.get_window()

        self.assertIsNot(first, second)

    def test_builder_platforms(self):
        """Test builders and products carry their platform."""
        self.assertEqual(WindowsWindowBuilder.platform, Platform.WINDOWS)
        self.assertEqual(MacOSWindowBuilder.platform, Platform.MACOS)
        self.assertEqual(WindowsWindow().platform, Platform.WINDOWS)
        self.assertEqual(MacOSWindow().platform, Platform.MACOS)

    def test_abstract_builder_cannot_be_instantiated(self):
        """Test WindowBuilder needs a concrete implementation."""
        with self.assertRaises(TypeError):
            WindowBuilder()

    def test_print_structure(self):
        """Test the structure is logged as one trace line."""
        window = Window(structure="Window: Standard Windows; ")

        with self.assertLogs('widgetkit', level='INFO') as logs:
            window.print_structure()

        self.assertEqual(logs.output, ["INFO:widgetkit:Window: Standard Windows; "])


class TestWindowCreationManager(unittest.TestCase):
    """Test the director recipes."""

    def setUp(self):
        """Set up test environment."""
        self.manager = WindowCreationManager()

    def test_default_window_macos(self):
        """Test the MacOS default window structure."""
        builder = MacOSWindowBuilder()
        self.manager.set_builder(builder)

        self.manager.create_default_window()

        self.assertEqual(builder.get_window().structure, MACOS_DEFAULT_STRUCTURE)

    def test_default_window_windows(self):
        """Test the Windows default window structure."""
        builder = WindowsWindowBuilder()
        self.manager.set_builder(builder)

        self.manager.create_default_window()

        self.assertEqual(builder.get_window().structure, WINDOWS_DEFAULT_STRUCTURE)

    def test_window_with_title(self):
        """Test the titled recipe passes the title verbatim."""
        builder = MagicMock(spec=WindowBuilder)
        builder.platform = Platform.WINDOWS
        self.manager.set_builder(builder)

        self.manager.create_window_with_title("Custom Title")

        self.assertEqual(builder.mock_calls, [
            call.create_native_window(),
            call.add_menubar(),
            call.set_title("Custom Title"),
            call.set_default_background_color(),
        ])

    def test_default_window_step_order(self):
        """Test the default recipe calls the steps in order."""
        builder = MagicMock(spec=WindowBuilder)
        builder.platform = Platform.MACOS
        manager = WindowCreationManager(builder)

        manager.create_default_window()

        self.assertEqual(builder.mock_calls, [
            call.create_native_window(),
            call.add_menubar(),
            call.set_title("New Window"),
            call.set_default_background_color(),
        ])

    def test_set_builder_replaces_builder(self):
        """Test later recipes use the most recently set builder."""
        first = WindowsWindowBuilder()
        second = MacOSWindowBuilder()

        self.manager.set_builder(first)
        self.manager.set_builder(second)
        self.manager.create_default_window()

        self.assertEqual(first.get_window().structure, "")
        self.assertEqual(second.get_window().structure, MACOS_DEFAULT_STRUCTURE)

    def test_recipe_without_builder(self):
        """Test running a recipe with no builder fails clearly."""
        with self.assertRaises(RuntimeError):
            self.manager.create_default_window()


class TestBuilderClientCode(unittest.TestCase):
    """Test the end-to-end builder scenario."""

    def test_client_builds_four_windows(self):
        """Test both builders run both recipes."""
        manager = WindowCreationManager()

        with self.assertLogs('widgetkit', level='INFO') as logs:
            windows = client_code(manager)

        self.assertEqual([type(w) for w in windows],
                         [WindowsWindow, WindowsWindow, MacOSWindow, MacOSWindow])
        self.assertEqual(windows[0].structure, WINDOWS_DEFAULT_STRUCTURE)
        self.assertIn("Window title: New title;", windows[1].structure)
        self.assertEqual(windows[2].structure, MACOS_DEFAULT_STRUCTURE)
        self.assertIn("Window title: New title;", windows[3].structure)
        self.assertEqual(logs.output, [f"INFO:widgetkit:{w.structure}" for w in windows])

    def test_titled_window_starts_clean(self):
        """Test the second recipe does not inherit the first window's fragments."""
        manager = WindowCreationManager()

        with self.assertLogs('widgetkit', level='INFO'):
            default_window, titled_window = build_both_recipes(manager, MacOSWindowBuilder(), "Prefs")

        self.assertEqual(default_window.structure, MACOS_DEFAULT_STRUCTURE)
        self.assertEqual(
            titled_window.structure,
            "Window: Standard MacOS; Menubar: MacOS default; Window title: Prefs;"
            "Background color: MacOS default; "
        )


if __name__ == '__main__':
    unittest.main()
