from build_checks import generate_validation_report
from conftest import write_md
from validation_issues import IssueCollector, ValidationResult
from validation_report import format_content_summary, format_validation_results


def test_clean_result():
    assert format_validation_results(ValidationResult()).strip() == "✅ All content validation passed!"


def test_errors_and_warnings_are_listed():
    issues = IssueCollector()
    issues.add_error("profile/main.md", "Required", "email")
    issues.add_warning("projects", "No content files found in projects collection")
    text = format_validation_results(issues.result())

    assert "❌ Found 1 validation error(s):" in text
    assert "  File: profile/main.md\n  Field: email\n  Error: Required" in text
    assert "⚠️  Found 1 warning(s):" in text
    assert "  File: projects\n  Warning: No content files found" in text
    assert "Field: None" not in text


def test_collector_report_and_clear():
    issues = IssueCollector()
    issues.add_error("a.md", "broken", "title")
    issues.add_warning("b.md", "thin")
    assert issues.has_errors() and issues.has_warnings()
    assert "a.md (title): broken" in issues.report()
    issues.clear()
    assert issues.result().is_valid and not issues.has_warnings()


def test_content_summary_table():
    text = format_content_summary({"projects": 2, "education": 0})
    assert "📊 Content Summary:" in text
    assert "projects    : 2 files" in text
    assert "education   : 0 files" in text
    assert "Project Details" not in text


def test_markdown_report_for_complete_site(site):
    content, public = site
    report = generate_validation_report(content, public)
    assert report.startswith("# Content Validation Report")
    assert "✅ **Status**: All content validation passed!" in report
    assert "📊 **Completeness Score**: 100%" in report
    assert "- Projects" in report
    assert "Errors" not in report
    assert "Missing Content" not in report


def test_markdown_report_lists_problems(site, records):
    content, public = site
    del records["profile"]["email"]
    write_md(content / "profile" / "main.md", records["profile"])
    (content / "education" / "london.md").unlink()

    report = generate_validation_report(content, public)
    assert "❌ **Status**: Content validation failed" in report
    assert "main.md** (email): Required" in report
    assert "No content files found in education collection" in report
    assert "📋 **Missing Content**:\n- education content" in report
    assert "💡 **Suggestions for Improvement**:" in report
