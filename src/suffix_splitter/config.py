from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "SUFFIX_SPLITTER_"}

    # Rule list; None loads the bundled snapshot
    rules_path: str | None = _defaults.get("rules_path")
    include_private_domains: bool = _defaults.get("include_private_domains", True)

    log_level: str = _defaults.get("log_level", "warning")
    output_format: str = _defaults.get("output_format", "json")


settings = Settings()
