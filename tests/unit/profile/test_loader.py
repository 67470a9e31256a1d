# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from journeyprofile.common.enums import IfEarly, IfLate
from journeyprofile.common.exceptions import ConfigurationError
from journeyprofile.profile.loader import load_configuration, parse_configuration

YAML_PROFILE = """\
scheduled:
  if_early: SLEEP
  if_late: end
scenarios:
  - at: "00:01:00"
    journey: calendar.FlingWeekPage
  - at: "00:04:00"
    journey: calendar.FlingDayPage
    extras:
      iterations: "3"
"""

JSON_PROFILE = """\
{
  "scenarios": [
    {"journey": "calendar.FlingWeekPage", "weight": 0.25},
    {"journey": "calendar.FlingDayPage", "weight": 0.75}
  ]
}
"""


class TestLoadConfiguration:
    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path, suffix):
        path = tmp_path / f"profile{suffix}"
        path.write_text(YAML_PROFILE)
        configuration = load_configuration(path)

        assert configuration.scheduled.if_early is IfEarly.SLEEP
        assert configuration.scheduled.if_late is IfLate.END
        assert [s.at for s in configuration.scenarios] == ["00:01:00", "00:04:00"]
        assert configuration.scenarios[1].extras == {"iterations": "3"}

    def test_json(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text(JSON_PROFILE)
        configuration = load_configuration(str(path))

        assert configuration.scheduled is None
        assert [s.weight for s in configuration.scenarios] == [0.25, 0.75]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_configuration(tmp_path / "absent.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "profile.txt"
        path.write_text(YAML_PROFILE)
        with pytest.raises(ConfigurationError, match="Unsupported profile file type"):
            load_configuration(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text('{"scenarios": [')
        with pytest.raises(ConfigurationError, match="Unable to decode"):
            load_configuration(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("scenarios: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Unable to decode"):
            load_configuration(path)


class TestParseConfiguration:
    def test_top_level_must_be_mapping(self):
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            parse_configuration(["not", "a", "profile"])

    def test_unknown_field(self):
        with pytest.raises(ConfigurationError, match="Invalid profile"):
            parse_configuration({"scenarios": [{"journey": "A", "when": "00:00:01"}]})

    def test_unsupported_policy(self):
        with pytest.raises(ConfigurationError, match="Invalid profile"):
            parse_configuration({"scheduled": {"if_late": "run_anyway"}})

    def test_structure_only(self):
        configuration = parse_configuration(
            {"scenarios": [{"journey": "A", "at": "00:00:01", "weight": 1}]}
        )
        assert configuration.scenarios[0].has_timestamp
        assert configuration.scenarios[0].has_weight
