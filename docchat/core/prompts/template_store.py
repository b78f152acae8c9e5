"""
Prompt template store.

Holds the name -> template mapping used by every prompt-building flow and
renders templates by literal {KEY} substitution.

Dependencies: threading, math
System role: Process-wide prompt template registry
"""

import logging
import math
import threading
from collections.abc import Iterable, Mapping

from docchat.core.prompts.templates import DEFAULT_TEMPLATES, FALLBACK_PROMPT

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4


def render_template(template: str, params: Iterable[tuple[str, str]]) -> str:
    """
    Substitute {KEY} tokens in a template.

    Pairs are applied in order; every occurrence of each token is replaced.
    Tokens with no matching pair stay in the output as literal text.

    Args:
        template: Template body
        params: Ordered (key, value) pairs

    Returns:
        str: Rendered text
    """
    rendered = template
    for key, value in params:
        rendered = rendered.replace("{" + key + "}", value)
    return rendered


def estimate_token_count(text: str) -> int:
    """Rough token estimate: one token per four characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


class PromptTemplateStore:
    """
    Lock-guarded mapping of template names to template bodies.

    Unknown names render to FALLBACK_PROMPT instead of raising. Updates
    are in-memory only and last for the lifetime of the store instance.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        """
        Initialize store.

        Args:
            templates: Initial templates (defaults to DEFAULT_TEMPLATES)
        """
        self._templates: dict[str, str] = dict(
            DEFAULT_TEMPLATES if templates is None else templates
        )
        self._lock = threading.RLock()

    def get(self, name: str, params: Mapping[str, str] | None = None) -> str:
        """
        Render a template by name.

        Args:
            name: Template name
            params: Optional KEY -> value substitutions

        Returns:
            str: Rendered template, or FALLBACK_PROMPT for unknown names
        """
        with self._lock:
            template = self._templates.get(name)

        if template is None:
            logger.debug("Prompt template not found, using fallback", extra={"template": name})
            return FALLBACK_PROMPT

        if not params:
            return template
        return render_template(template, list(params.items()))

    def list(self) -> list[str]:
        """Return all registered template names."""
        with self._lock:
            return list(self._templates.keys())

    def update(self, name: str, template: str) -> None:
        """
        Insert or overwrite a template.

        No placeholder validation is performed.

        Args:
            name: Template name
            template: New template body
        """
        with self._lock:
            replaced = name in self._templates
            self._templates[name] = template
        logger.info(
            "Prompt template updated",
            extra={"template": name, "replaced": replaced, "length": len(template)},
        )

    def estimate_tokens(
        self,
        name: str,
        params: Mapping[str, str] | None = None,
    ) -> tuple[str, int]:
        """
        Render a template and estimate its token count.

        Args:
            name: Template name
            params: Optional KEY -> value substitutions

        Returns:
            tuple[str, int]: (rendered prompt, ceil(len / 4))
        """
        prompt = self.get(name, params)
        return prompt, estimate_token_count(prompt)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._templates
