"""Tests for TOML sectioned profile mapping layer."""

import tomlkit

from domain.models import TilerConfig
from domain.toml_sections import (
    SECTION_MAP,
    flat_to_sectioned,
    sectioned_to_flat,
)


class TestFlatToSectioned:
    """Tests for flat_to_sectioned()."""

    def test_creates_expected_sections(self):
        result = flat_to_sectioned(TilerConfig().model_dump())
        assert set(result) == {'grid', 'zoom', 'filters'}

    def test_zoom_fields_in_section(self):
        result = flat_to_sectioned(TilerConfig(zoom_min=2, zoom_max=18).model_dump())
        assert result['zoom'] == {'min': 2, 'max': 18}
        assert 'zoom_min' not in result['zoom']

    def test_unknown_fields_go_to_common(self):
        result = flat_to_sectioned({'margin': 1, 'comment': 'x'})
        assert result['common'] == {'comment': 'x'}
        assert result['grid'] == {'margin': 1}

    def test_every_field_mapped(self):
        mapped = {flat for fields in SECTION_MAP.values() for flat in fields}
        assert mapped == set(TilerConfig.model_fields)


class TestSectionedToFlat:
    """Tests for sectioned_to_flat()."""

    def test_expands_short_names(self):
        flat = sectioned_to_flat({'zoom': {'min': 4, 'max': 12}})
        assert flat == {'zoom_min': 4, 'zoom_max': 12}

    def test_flat_top_level_keys(self):
        assert sectioned_to_flat({'margin': 2, 'tile_size': 512}) == {
            'margin': 2,
            'tile_size': 512,
        }

    def test_common_and_unknown_sections_pass_through(self):
        flat = sectioned_to_flat({'common': {'a': 1}, 'other': {'b': 2}})
        assert flat == {'a': 1, 'b': 2}

    def test_round_trip_through_toml(self):
        config = TilerConfig(
            tile_size=512, zoom_min=3, zoom_max=19, margin=2, skip_null_island=True
        )
        text = tomlkit.dumps(flat_to_sectioned(config.model_dump()))
        data = tomlkit.parse(text).unwrap()
        assert TilerConfig.model_validate(sectioned_to_flat(data)) == config
