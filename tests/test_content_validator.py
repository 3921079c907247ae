import shutil

import pytest

from conftest import write_md
from content_errors import ContentValidationError
from content_validator import (
    validate_all_content,
    validate_collection,
    validate_content_file,
    validate_content_or_raise,
    validate_profile,
    validate_skills,
    validate_specific,
)


def test_complete_site_passes_without_warnings(site):
    content, public = site
    result = validate_all_content(content, public)
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_missing_profile_is_an_error(site):
    content, public = site
    (content / "profile" / "main.md").unlink()
    result = validate_profile(content, public)
    assert not result.is_valid
    assert [e.message for e in result.errors] == ["profile file not found"]


def test_schema_violation_names_the_field(site, records):
    content, public = site
    del records["skills"]["categories"]
    write_md(content / "skills" / "main.md", records["skills"])
    result = validate_skills(content, public)
    assert [(e.field, e.message) for e in result.errors] == [("categories", "Required")]
    assert result.errors[0].severity == "error"


def test_malformed_file_is_recorded_and_run_continues(site, records):
    content, public = site
    (content / "projects" / "broken.md").write_text("---\ntitle: [unclosed\n---\nbody\n", encoding="utf-8")
    bad = dict(records["project"], tags=[])
    write_md(content / "projects" / "zz-bad.md", bad)

    result = validate_collection("projects", content, public)
    messages = [(e.file.rsplit("/", 1)[-1], e.message) for e in result.errors]
    assert messages[0][0] == "broken.md"
    assert messages[0][1].startswith("Failed to parse file:")
    assert ("zz-bad.md", "At least one tag is required") in messages


def test_undecodable_file_never_raises(site):
    content, public = site
    (content / "education" / "binary.md").write_bytes(b"\xff\xfe\x00garbage")
    result = validate_all_content(content, public)
    assert any(e.message.startswith("Failed to parse file:") for e in result.errors)


def test_file_without_front_matter_reports_every_required_field(site):
    content, public = site
    write_md(content / "publications" / "plain.md", None)
    result = validate_collection("publications", content, public)
    fields = {e.field for e in result.errors if e.file.endswith("plain.md")}
    assert fields == {"title", "authors", "venue", "year", "type"}


def test_missing_collection_directory(site):
    content, public = site
    shutil.rmtree(content / "publications")
    result = validate_all_content(content, public)
    assert [e.message for e in result.errors] == ["Collection directory not found: publications"]


def test_empty_collection_is_only_a_warning(site):
    content, public = site
    for path in (content / "education").iterdir():
        path.unlink()
    result = validate_collection("education", content, public)
    assert result.is_valid
    assert [w.message for w in result.warnings] == ["No content files found in education collection"]


def test_hidden_and_non_markdown_files_are_ignored(site):
    content, public = site
    (content / "projects" / ".draft.md").write_text("---\ntitle: x\n---\n", encoding="utf-8")
    (content / "projects" / "notes.txt").write_text("scratch", encoding="utf-8")
    assert validate_collection("projects", content, public).is_valid


def test_short_body_warns_for_collections_only(site, records):
    content, public = site
    write_md(content / "experience" / "acme.md", records["experience"], body="Short.")
    write_md(content / "profile" / "main.md", records["profile"], body="Short.")
    result = validate_all_content(content, public)
    assert result.is_valid
    assert [w.message for w in result.warnings] == [
        "experience content is very short (less than 50 characters). Consider adding more details."
    ]


def test_missing_asset_is_a_warning(site, records):
    content, public = site
    record = dict(records["project"], image="/images/missing.png")
    path = write_md(content / "projects" / "engine.md", record)
    result = validate_content_file(path, "project", public)
    assert result.is_valid
    assert [(w.field, w.message) for w in result.warnings] == [
        ("image", "Referenced image file not found: /images/missing.png")
    ]


def test_single_file_resolves_public_dir_from_site_root(site):
    content, public = site
    path = content / "profile" / "main.md"
    assert validate_content_file(path, "profile").warnings == []

    (public / "images" / "profile.jpg").unlink()
    assert [w.message for w in validate_content_file(path, "profile").warnings] == [
        "Referenced profile image file not found: /images/profile.jpg"
    ]


def test_missing_logo_and_profile_image(site):
    content, public = site
    (public / "logos" / "acme.png").unlink()
    (public / "images" / "profile.jpg").unlink()
    result = validate_all_content(content, public)
    assert result.is_valid
    assert {w.field for w in result.warnings} == {"logo", "profileImage"}


def test_remote_images_are_not_checked(site, records):
    content, public = site
    record = dict(records["project"], image="https://cdn.example.com/engine.png")
    path = write_md(content / "projects" / "engine.md", record)
    assert validate_content_file(path, "project", public).warnings == []


def test_badly_formatted_dates_warn(site, records):
    content, public = site
    record = dict(records["experience"], startDate="January 2020")
    path = write_md(content / "experience" / "acme.md", record)
    result = validate_content_file(path, "experience", public)
    assert result.is_valid
    assert [w.field for w in result.warnings] == ["startDate"]


def test_validate_specific(site):
    content, public = site
    assert validate_specific("profile", content, public).is_valid
    assert validate_specific("publications", content, public).is_valid
    with pytest.raises(ValueError):
        validate_specific("blog", content, public)


def test_validate_content_or_raise(site, records):
    content, public = site
    del records["profile"]["email"]
    write_md(content / "profile" / "main.md", records["profile"])
    with pytest.raises(ContentValidationError) as info:
        validate_content_or_raise(content, public)
    assert info.value.has_field_errors("email")
    assert info.value.errors_for_file("profile/main.md")
    assert "Content validation failed" in str(info.value)
