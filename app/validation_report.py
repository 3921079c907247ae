from pathlib import Path
from typing import Mapping

from jinja2 import Environment, FileSystemLoader

from validation_issues import ValidationResult

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=False, trim_blocks=True, lstrip_blocks=True,
                  keep_trailing_newline=True)


def render(template: str, **context) -> str:
    return env.get_template(template).render(**context)


def format_validation_results(result: ValidationResult) -> str:
    """Console block listing every error and warning with its file and field."""
    return render("validation_results.txt.j2", result=result)


def format_content_summary(counts: Mapping[str, int], projects=None, timeline=None) -> str:
    """The per-collection file count table, optionally with project stats and a timeline."""
    return render("content_summary.txt.j2", counts=counts, projects=projects, timeline=timeline)
