from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from .errors import InvalidDomain
from .models import DomainParts
from .yaml_config import get_output_strings


class OutputHandler(ABC):
    @abstractmethod
    def emit_parts(self, parts: DomainParts) -> None: ...

    def emit_error(self, error: InvalidDomain) -> None:
        strings = get_output_strings()
        print(f"{strings['invalid_domain']}: {error.domain}", file=sys.stderr)


class JsonHandler(OutputHandler):
    """One JSON object per domain: {"suffix", "domain", "subdomain"}."""

    def emit_parts(self, parts: DomainParts) -> None:
        print(parts.model_dump_json())


class TextHandler(OutputHandler):
    def emit_parts(self, parts: DomainParts) -> None:
        print(get_output_strings()["text_template"].format(**parts.model_dump()))


def get_handler(output_format: str) -> OutputHandler:
    if output_format == "text":
        return TextHandler()
    return JsonHandler()
