"""Tests for identifier syntax rules."""

from schema_names.check_identifier import check_component, check_full_name


def test_component_valid() -> None:
    """Verify that letters, digits and underscores are accepted."""
    assert check_component("_a1") is None
    assert check_component("Record") is None


def test_component_empty() -> None:
    """Verify that an empty component is rejected."""
    assert check_component("") == "cannot be empty"


def test_component_bad_start() -> None:
    """Verify that a digit cannot start an identifier."""
    assert check_component("9lives") == (
        "must start with a letter or underscore; received: '9lives'"
    )


def test_component_reports_first_bad_character() -> None:
    """Verify that the first disallowed character is named."""
    assert check_component("a$b&") == "must not contain character '$'; received: 'a$b&'"


def test_component_rejects_non_ascii() -> None:
    """Verify that non-ASCII letters are not identifier characters."""
    assert check_component("café") is not None
    assert check_component("Ärger") is not None


def test_full_name_checks_namespace_first() -> None:
    """Verify that namespace violations are reported before the short name."""
    problem = check_full_name("org.9x.&Y")
    assert problem is not None
    assert problem.startswith("namespace 'org.9x'")


def test_full_name_relaxed_leading_dot() -> None:
    """Verify that relaxed mode skips a single leading dot."""
    assert check_full_name(".org.foo.X") is not None
    assert check_full_name(".org.foo.X", relaxed=True) is None
    assert check_full_name("..org.X", relaxed=True) is not None
