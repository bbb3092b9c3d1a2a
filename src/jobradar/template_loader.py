"""Load Secretary extraction templates."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from jobradar.errors import TemplateNotFoundError

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class TemplateName(str, Enum):
    JOB_DATA = "ExtractJobDataFromWebsite"
    JOB_LIST = "ExtractJobListFromWebsite"


def load_template(
    name: TemplateName | str, template_dir: Path | str | None = None
) -> str:
    template_name = name.value if isinstance(name, TemplateName) else str(name)
    base_dir = Path(template_dir).expanduser() if template_dir else _TEMPLATES_DIR
    path = base_dir / f"{template_name}.md"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateNotFoundError(
            f'Template "{template_name}" could not be loaded: {exc}',
            hint="Set template_dir in the config or drop it to use the bundled templates.",
        ) from exc
