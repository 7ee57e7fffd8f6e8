import json
from pathlib import Path

import pytest

import seedling.templates as templates
from seedling.services import InvalidTemplateError, MissingTemplateError, UnknownTemplateError


def _make_template(root: Path, template_id: str, descriptor: object | None = None) -> Path:
    template_root = root / template_id
    (template_root / "template" / "src").mkdir(parents=True)
    (template_root / "template" / "src" / "index.ts").write_text("export {}\n", encoding="utf-8")
    if descriptor is not None:
        (template_root / "template.json").write_text(json.dumps(descriptor), encoding="utf-8")
    return template_root


class TestCatalogListing:
    def test_lists_static_catalog_in_order(self, tmp_path: Path) -> None:
        catalog = templates.TemplateCatalog(tmp_path)

        assert [template.id for template in catalog.list()] == [
            "react-app",
            "react-app-ts",
            "ts-library",
            "react-lib",
        ]
        assert catalog.get("ts-library").display_label == "ts-lib"

    def test_listing_ignores_directories_on_disk(self, tmp_path: Path) -> None:
        _make_template(tmp_path, "vue-app")
        catalog = templates.TemplateCatalog(tmp_path)

        assert "vue-app" not in [template.id for template in catalog.list()]
        with pytest.raises(UnknownTemplateError):
            catalog.resolve("vue-app")

    def test_root_defaults_to_environment_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(templates.TEMPLATES_DIR_ENV, str(tmp_path))

        assert templates.TemplateCatalog().root == tmp_path

    def test_root_defaults_to_packaged_templates(self) -> None:
        assert templates.TemplateCatalog().root == templates.packaged_templates_dir()


class TestResolve:
    def test_loads_manifest_overrides(self, tmp_path: Path) -> None:
        template_root = _make_template(
            tmp_path, "react-app-ts", {"package": {"scripts": {"dev": "vite"}}}
        )

        template = templates.TemplateCatalog(tmp_path).resolve("react-app-ts")

        assert template.root == template_root
        assert template.files_dir == template_root / "template"
        assert template.manifest_overrides == {"scripts": {"dev": "vite"}}

    def test_missing_descriptor_yields_empty_overrides(self, tmp_path: Path) -> None:
        _make_template(tmp_path, "react-app")

        template = templates.TemplateCatalog(tmp_path).resolve("react-app")

        assert template.manifest_overrides == {}

    def test_missing_file_tree_raises(self, tmp_path: Path) -> None:
        (tmp_path / "react-lib").mkdir()
        (tmp_path / "react-lib" / "template.json").write_text("{}", encoding="utf-8")

        with pytest.raises(MissingTemplateError) as excinfo:
            templates.TemplateCatalog(tmp_path).resolve("react-lib")

        assert excinfo.value.template_dir == tmp_path / "react-lib" / "template"
        assert excinfo.value.code == "dependency_missing"

    @pytest.mark.parametrize(
        "descriptor",
        [["not", "an", "object"], {"package": "nope"}, {"package": ["a"]}],
    )
    def test_invalid_descriptor_shape_raises(self, tmp_path: Path, descriptor: object) -> None:
        _make_template(tmp_path, "react-app", descriptor)

        with pytest.raises(InvalidTemplateError):
            templates.TemplateCatalog(tmp_path).resolve("react-app")

    def test_malformed_descriptor_json_raises(self, tmp_path: Path) -> None:
        template_root = _make_template(tmp_path, "react-app")
        (template_root / "template.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidTemplateError):
            templates.TemplateCatalog(tmp_path).resolve("react-app")

    def test_resolve_does_not_mutate_catalog_entries(self, tmp_path: Path) -> None:
        _make_template(tmp_path, "react-app", {"package": {"private": False}})
        catalog = templates.TemplateCatalog(tmp_path)

        catalog.resolve("react-app")

        assert catalog.get("react-app").manifest_overrides == {}
        assert catalog.get("react-app").root is None


class TestPackagedTemplates:
    @pytest.mark.parametrize("template_id", [t.id for t in templates.CATALOG])
    def test_every_catalog_entry_is_bundled(self, template_id: str) -> None:
        template = templates.TemplateCatalog().resolve(template_id)

        assert template.files_dir is not None
        assert template.files_dir.is_dir()
        assert "dev" in template.manifest_overrides.get("scripts", {})
