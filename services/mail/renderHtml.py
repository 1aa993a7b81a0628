from dataclasses import dataclass
from typing import List, Union

from jinja2 import Environment


@dataclass(frozen=True)
class Text:
    text: str
    kind: str = "text"


@dataclass(frozen=True)
class LineBreak:
    kind: str = "br"


@dataclass(frozen=True)
class Link:
    href: str
    text: str
    kind: str = "a"


Node = Union[Text, LineBreak, Link]
Paragraph = List[Node]

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

BODY_HTML = _env.from_string(
    "<html><body>"
    "{% for paragraph in paragraphs %}<p>"
    "{% for node in paragraph %}"
    "{% if node.kind == 'br' %}<br>"
    "{% elif node.kind == 'a' %}<a href=\"{{ node.href }}\">{{ node.text }}</a>"
    "{% else %}{{ node.text }}{% endif %}"
    "{% endfor %}"
    "</p>{% endfor %}"
    "</body></html>"
)


def render_html(paragraphs: List[Paragraph]) -> str:
    """Convierte los párrafos en HTML escapando el texto."""
    return BODY_HTML.render(paragraphs=paragraphs)
