"""Tests for whatday.model.catalog: promoted apps and the bundled JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from whatday.config import PROMOTED_APPS_PATH
from whatday.model.catalog import (
    EMPTY_INFO_CONTENT,
    CatalogError,
    InfoContent,
    PromotedApp,
    load_info_content,
)


class TestBundledCatalog:

    def test_bundled_content(self, catalog: InfoContent) -> None:
        names = [app.name for app in catalog.apps]
        assert names[0] == "SOS Light"
        assert len(names) == 8
        assert all(app.url.startswith("https://") for app in catalog.apps)
        assert any("1800 to 2300" in line for line in catalog.functionality_lines)

    def test_bundled_file_lives_in_package(self) -> None:
        assert Path(PROMOTED_APPS_PATH).parent.name == "resources"
        assert Path(PROMOTED_APPS_PATH).parent.parent.name == "whatday"

    def test_records_are_read_only(self, catalog: InfoContent) -> None:
        with pytest.raises(AttributeError):
            catalog.apps[0].name = "Other"  # type: ignore[misc]

    def test_empty_fallback_has_titles_only(self) -> None:
        assert EMPTY_INFO_CONTENT.apps == ()
        assert EMPTY_INFO_CONTENT.ads_title == "Ads & App Functionality"


class TestLoadInfoContent:

    def test_round_trip_through_file(self, tmp_path: Path) -> None:
        content = InfoContent(
            functionality_lines=("one",),
            apps=(PromotedApp("img", "App", "Does things.", "https://example.com/app"),),
        )
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(content.to_dict()), encoding="utf-8")
        assert load_info_content(str(path)) == content

    def test_missing_fields_use_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"apps": [{"name": "Only Name"}]}), encoding="utf-8")
        content = load_info_content(str(path))
        assert content.ads_title == "Ads & App Functionality"
        assert content.apps == (PromotedApp("", "Only Name", "", ""),)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Cannot read catalog"):
            load_info_content(str(tmp_path / "nope.json"))

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="Malformed catalog"):
            load_info_content(str(path))

    def test_wrong_top_level_type(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(CatalogError, match="top level"):
            load_info_content(str(path))

    def test_app_without_name(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"apps": [{"url": "https://example.com"}]}), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_info_content(str(path))

    def test_catalog_error_is_value_error(self) -> None:
        assert issubclass(CatalogError, ValueError)
