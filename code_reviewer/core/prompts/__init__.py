"""Prompt templates using Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

PROMPTS_DIR = Path(__file__).parent
_env = Environment(loader=FileSystemLoader(PROMPTS_DIR))


def build_review_prompt(code: str, language: str) -> str:
    """Render the code review prompt for a single snippet.

    Callers validate ``code`` and ``language`` first; the snippet is embedded
    verbatim.
    """
    template = _env.get_template("code_review.jinja2")
    return template.render(code=code, language=language)
