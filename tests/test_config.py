from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from plannergen.errors import ConfigError
from plannergen.models import (
    CalendarSectionOptions,
    NotesSectionOptions,
    SectionOptions,
    load_planner_config,
    parse_planner_config,
)


class ConfigTests(unittest.TestCase):
    def test_missing_enabled_is_disabled(self) -> None:
        planner_config = parse_planner_config({"sections": {"title": {}, "notes": None}})
        self.assertFalse(planner_config.sections["title"].enabled)
        self.assertFalse(planner_config.sections["notes"].enabled)
        self.assertEqual(planner_config.enabled_sections(), {})

    def test_known_sections_get_typed_options(self) -> None:
        planner_config = parse_planner_config(
            {"sections": {"monthly": {"enabled": True, "week_number_placement": "right"}, "notes": {}}}
        )
        monthly = planner_config.sections["monthly"]
        self.assertIsInstance(monthly, CalendarSectionOptions)
        self.assertEqual(monthly.week_number_placement, "right")
        self.assertTrue(monthly.with_week_numbers)
        self.assertIsInstance(planner_config.sections["notes"], NotesSectionOptions)
        self.assertEqual(planner_config.sections["notes"].name, "notes")

    def test_template_parameters_are_kept(self) -> None:
        planner_config = parse_planner_config({"sections": {"cover": {"enabled": True, "color": "red"}}})
        cover = planner_config.sections["cover"]
        self.assertIs(type(cover), SectionOptions)
        self.assertEqual(cover.extras, {"color": "red"})

    def test_template_name_falls_back_to_global(self) -> None:
        planner_config = parse_planner_config(
            {
                "parameters": {"template_name": "breadcrumb"},
                "sections": {"title": {"enabled": True}, "notes": {"template_name": "mos"}},
            }
        )
        self.assertEqual(planner_config.template_for(planner_config.sections["title"]), "breadcrumb")
        self.assertEqual(planner_config.template_for(planner_config.sections["notes"]), "mos")

    def test_invalid_values_fail_at_load_time(self) -> None:
        bad_configs = [
            {"sections": {"monthly": {"week_number_placement": "middle"}}},
            {"sections": {"notes": {"width": "0mm"}}},
            {"sections": {"notes": {"pages": 0}}},
            {"sections": {"daily": {"schedule_from": 20, "schedule_to": 8}}},
            {"sections": {"my-notes": {}}},
            {"sections": {"notes": {}, " notes": {}}},
            {"sections": {"notes": True}},
            {"parameters": {"weekday_start": "funday"}},
            {"parameters": {"margin": "wide"}},
            {"parameters": {"locale": "fr"}},
            ["not", "a", "mapping"],
        ]
        for raw in bad_configs:
            with self.subTest(raw=raw):
                with self.assertRaises(ConfigError):
                    parse_planner_config(raw)

    def test_unknown_locale_fails_before_any_section_runs(self) -> None:
        with self.assertRaises(ConfigError) as caught:
            parse_planner_config(
                {"parameters": {"locale": "fr"}, "sections": {"title": {"enabled": True}, "notes": {"enabled": True}}}
            )
        self.assertIn("fr", str(caught.exception))
        self.assertIn("de", str(caught.exception))

    def test_shipped_locales_are_accepted(self) -> None:
        for locale in ["en", "de"]:
            with self.subTest(locale=locale):
                planner_config = parse_planner_config({"parameters": {"locale": locale}})
                self.assertEqual(planner_config.parameters.locale, locale)

    def test_section_names_must_be_usable_file_stems(self) -> None:
        for name in ["notes_", "_notes", "a__b", "to-do", "2026"]:
            with self.subTest(name=name):
                with self.assertRaises(ConfigError):
                    parse_planner_config({"sections": {name: {"enabled": True}}})
        planner_config = parse_planner_config({"sections": {"to_do": {}, "notes2": {}}})
        self.assertEqual(list(planner_config.sections), ["to_do", "notes2"])

    def test_section_names_keep_their_case(self) -> None:
        planner_config = parse_planner_config({"sections": {"Notes": {}, "notes": {}}})
        self.assertEqual(list(planner_config.sections), ["Notes", "notes"])

    def test_load_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "planner.yaml"
            path.write_text(
                "parameters:\n  year: 2027\n  weekday_start: sunday\nsections:\n  monthly:\n    enabled: true\n",
                encoding="utf-8",
            )
            planner_config = load_planner_config(path)
        self.assertEqual(planner_config.parameters.year, 2027)
        self.assertEqual(planner_config.parameters.weekday_start, "sunday")
        self.assertEqual(list(planner_config.enabled_sections()), ["monthly"])

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_planner_config(Path("does-not-exist.yaml"))


if __name__ == "__main__":
    unittest.main()
