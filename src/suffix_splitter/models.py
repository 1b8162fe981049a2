from __future__ import annotations

from pydantic import BaseModel


class DomainParts(BaseModel):
    """A domain split into public suffix, registrable label and subdomain prefix."""

    model_config = {"frozen": True}

    suffix: str
    domain: str
    subdomain: str = ""

    @property
    def registered_domain(self) -> str:
        """Registrable label plus suffix, or "" when either is missing."""
        if self.domain and self.suffix:
            return f"{self.domain}.{self.suffix}"
        return ""

    @property
    def fqdn(self) -> str:
        return ".".join(p for p in (self.subdomain, self.domain, self.suffix) if p)

    def astuple(self) -> tuple[str, str, str]:
        return self.suffix, self.domain, self.subdomain
