import pytest

import seedling.naming as naming


class TestValidateName:
    @pytest.mark.parametrize(
        "name",
        ["my-app", "some.package", "under_score", "app123", "@scope/my-app", "a" * 214],
    )
    def test_accepts_valid_names(self, name: str) -> None:
        result = naming.validate_name(name)

        assert result.valid_for_new_packages is True
        assert result.messages == ()

    def test_uppercase_and_space_are_both_reported(self) -> None:
        result = naming.validate_name("My App")

        assert result.valid_for_new_packages is False
        assert result.valid_for_old_packages is False
        assert "name can only contain URL-friendly characters" in result.errors
        assert "name can no longer contain capital letters" in result.warnings

    def test_uppercase_alone_is_a_warning(self) -> None:
        result = naming.validate_name("MyApp")

        assert result.errors == ()
        assert result.warnings == ("name can no longer contain capital letters",)
        assert result.valid_for_old_packages is True
        assert result.valid_for_new_packages is False

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "name length must be greater than zero"),
            (".hidden", "name cannot start with a period"),
            ("_private", "name cannot start with an underscore"),
            (" padded", "name cannot contain leading or trailing spaces"),
            ("node_modules", "node_modules is not a valid package name"),
            ("FAVICON.ICO", "favicon.ico is not a valid package name"),
            ("café", "name can only contain URL-friendly characters"),
            ("@scope/.pkg", "name cannot start with a period"),
        ],
    )
    def test_reports_errors(self, name: str, message: str) -> None:
        result = naming.validate_name(name)

        assert message in result.errors
        assert result.valid_for_new_packages is False

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("fs", "fs is a core module name"),
            ("http", "http is a core module name"),
            ("a" * 215, "name can no longer contain more than 214 characters"),
            ("wow!", 'name can no longer contain special characters ("~\'!()*")'),
        ],
    )
    def test_reports_warnings(self, name: str, message: str) -> None:
        result = naming.validate_name(name)

        assert result.errors == ()
        assert message in result.warnings

    def test_scope_with_invalid_characters_is_rejected(self) -> None:
        result = naming.validate_name("@my scope/pkg")

        assert result.errors == ("name can only contain URL-friendly characters",)

    def test_nested_paths_are_not_url_friendly(self) -> None:
        result = naming.validate_name("a/b/c")

        assert "name can only contain URL-friendly characters" in result.errors

    def test_messages_list_errors_before_warnings(self) -> None:
        result = naming.validate_name("_Bad")

        assert result.messages == (
            "name cannot start with an underscore",
            "name can no longer contain capital letters",
        )
